from gamesuite.domain.guess import is_valid_guess
from gamesuite.testing import StatsFactory, WordFactory


def test_word_factory_builds_valid_words():
    factory = WordFactory(length=6)
    for word in factory.batch(10):
        assert is_valid_guess(word, length=6)


def test_stats_factory_respects_invariant():
    factory = StatsFactory()
    for _ in range(10):
        stats = factory.build(plays=3)
        assert stats.times_played == 3
        assert len(stats.scores) <= stats.times_played
        assert stats.last_played is not None
