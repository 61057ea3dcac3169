"""Domain Entity 테스트."""

from uuid import uuid4

from apps.characters.domain.entities import Character
from apps.characters.domain.enums import Episode


class TestCharacterEntity:
    """Character 엔티티 테스트."""

    def test_creation_with_required_fields(self) -> None:
        """이름만으로 생성하면 나머지는 미상(None) 또는 빈 목록."""
        character = Character(name="Yoda")

        assert character.name == "Yoda"
        assert character.episodes == []
        assert character.planet is None
        assert character.species is None
        assert character.affiliation is None
        assert character.id is None
        assert character.created_at is None
        assert character.updated_at is None

    def test_episode_order_and_duplicates_preserved(self) -> None:
        """에피소드 순서와 중복이 그대로 유지됨."""
        episodes = [Episode.JEDI, Episode.NEWHOPE, Episode.JEDI]
        character = Character(name="Yoda", episodes=episodes)

        assert character.episodes == [Episode.JEDI, Episode.NEWHOPE, Episode.JEDI]

    def test_default_episode_lists_are_not_shared(self) -> None:
        """기본 episodes 목록은 인스턴스마다 독립적."""
        first = Character(name="A")
        second = Character(name="B")
        first.episodes.append(Episode.SITH)

        assert second.episodes == []

    def test_id_populated_by_storage(self) -> None:
        """저장 계층이 부여한 id를 그대로 보관."""
        character_id = uuid4()
        character = Character(name="Rey", id=character_id)

        assert character.id == character_id


class TestEpisodeEnum:
    """Episode 열거형 테스트."""

    def test_known_installments(self) -> None:
        """고정된 9개 에피소드."""
        assert [e.value for e in Episode] == [
            "NEWHOPE",
            "EMPIRE",
            "JEDI",
            "PHANTOM",
            "CLONES",
            "SITH",
            "AWAKENS",
            "LAST_JEDI",
            "RISE_SKYWALKER",
        ]

    def test_string_compatible(self) -> None:
        """저장소에서 읽은 문자열과 동등 비교 가능."""
        assert Episode("EMPIRE") is Episode.EMPIRE
        assert Episode.EMPIRE == "EMPIRE"
