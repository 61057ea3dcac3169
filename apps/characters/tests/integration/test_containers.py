"""컨테이너 헬퍼 테스트 (Docker 불필요)."""

import pytest

from apps.characters.tests.integration import containers


class UnreachableDaemon:
    def __init__(self, image: str) -> None:
        raise FileNotFoundError(2, "No such file or directory")


class FailingStart:
    def __init__(self, image: str) -> None:
        self.image = image

    def start(self) -> None:
        raise ConnectionError("daemon refused connection")


@pytest.mark.parametrize("container_cls", [UnreachableDaemon, FailingStart])
def test_skips_when_docker_unavailable(monkeypatch: pytest.MonkeyPatch, container_cls) -> None:
    """생성자 또는 start 단계의 Docker 오류는 skip으로 처리."""
    monkeypatch.setattr(containers, "PostgresContainer", container_cls)

    with pytest.raises(pytest.skip.Exception, match="Docker not available"):
        containers.start_postgres_container()


def test_returns_started_container(monkeypatch: pytest.MonkeyPatch) -> None:
    started = []

    class RecordingContainer:
        def __init__(self, image: str) -> None:
            self.image = image

        def start(self) -> None:
            started.append(self.image)

    monkeypatch.setattr(containers, "PostgresContainer", RecordingContainer)

    container = containers.start_postgres_container()

    assert container.image == containers.POSTGRES_IMAGE
    assert started == [containers.POSTGRES_IMAGE]
