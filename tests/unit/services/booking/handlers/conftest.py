from dataclasses import dataclass

import pytest

from services.booking.handlers import composition_root


@pytest.fixture
def lambda_context():
    """Powertools の inject_lambda_context が参照する属性だけを持つ LambdaContext"""

    @dataclass
    class LambdaContext:
        function_name: str = "test"
        memory_limit_in_mb: int = 128
        invoked_function_arn: str = (
            "arn:aws:lambda:ap-northeast-1:123456789012:function:test"
        )
        aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"

    return LambdaContext()


@pytest.fixture
def container(monkeypatch, clock):
    """ハンドラが共有するコンテナを固定日付のものに差し替える"""
    container = composition_root.build_container(clock=clock, environ={})
    monkeypatch.setattr(composition_root, "_container", container)
    return container
