import pytest

from image_provisioner import pending


class FakeClock:
    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture(autouse=True)
def clock(monkeypatch):
    fake = FakeClock()
    monkeypatch.setattr(pending.time, "monotonic", fake.monotonic)
    monkeypatch.setattr(pending.time, "sleep", fake.sleep)
    return fake
