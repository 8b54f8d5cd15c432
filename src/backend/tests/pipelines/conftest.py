import pytest

from adapters.memory_store import InMemoryVelocityStore
from common.velocity_engine.engine import VelocityRuleEngine
from pipelines.dispatch import LoadDispatcher


class ListOutcomeSink:
    def __init__(self):
        self.decisions = []
        self.errors = []
        self.order = []

    def publish(self, decision):
        self.decisions.append(decision)
        self.order.append(("decision", decision.id))

    def publish_error(self, message):
        self.errors.append(message)
        self.order.append(("error", message))


@pytest.fixture
def sink() -> ListOutcomeSink:
    return ListOutcomeSink()


@pytest.fixture
def dispatcher(sink) -> LoadDispatcher:
    return LoadDispatcher(VelocityRuleEngine(InMemoryVelocityStore()), sink)
