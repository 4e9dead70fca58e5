from tests.fakes.factories import make_character, make_episode
from tests.fakes.fake_entity_source import FakeEntitySource

__all__ = ["FakeEntitySource", "make_character", "make_episode"]
