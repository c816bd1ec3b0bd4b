from services.shared.domain import AggregateRoot


class _Sample(AggregateRoot[str]):
    pass


class TestAggregateRoot:
    def test_equality_by_id(self):
        assert _Sample("a") == _Sample("a")
        assert _Sample("a") != _Sample("b")

    def test_unidentified_entities_compare_by_identity(self):
        first = _Sample(None)
        second = _Sample(None)
        assert first != second
        assert first == first

    def test_flush_domain_events(self):
        aggregate = _Sample("a")
        aggregate.add_domain_event("created")

        assert aggregate.flush_domain_events() == ["created"]
        assert aggregate.flush_domain_events() == []
