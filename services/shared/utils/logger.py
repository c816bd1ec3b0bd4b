from typing import Optional

from aws_lambda_powertools import Logger


def get_logger(service_name: str, level: Optional[str] = None) -> Logger:
    """サービス名付きの構造化ロガーを返す

    level 未指定時は POWERTOOLS_LOG_LEVEL 環境変数（既定 INFO）に従う。
    """
    return Logger(service=service_name, level=level)
