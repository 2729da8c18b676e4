"""Test module for top speed selection.

Covers the select_max function, the LinearScanSpeedSelector service and the
RacerRoster sequence.
"""

import itertools
import logging
from unittest.mock import Mock

import pytest

from racer_playground.domain import (
    FlappyBird,
    Motorcycle,
    Penguin,
    SwiftBird,
    UnladenSwallow,
)
from racer_playground.exceptions import NotARacerError, PlaygroundError
from racer_playground.service import (
    FixedSpeedRacer,
    ISpeedSelector,
    LinearScanSpeedSelector,
    RacerRoster,
    SpeedSelectorProtocol,
    select_max,
)


def boosted_swift_bird() -> SwiftBird:
    swift_bird = SwiftBird(version=5.0)
    swift_bird.boost(3.0)
    return swift_bird


def mixed_racers() -> list:
    """Racers with speeds 10, 9, 0, 42, 5015, 180 and 200."""
    return [
        UnladenSwallow.AFRICAN,
        UnladenSwallow.EUROPEAN,
        UnladenSwallow.UNKNOWN,
        Penguin(name="King Penguin"),
        boosted_swift_bird(),
        FlappyBird(name="Felipe", flappy_amplitude=3.0, flappy_frequency=20.0),
        Motorcycle(name="Giacomo"),
    ]


class TestSelectMax:
    """Test cases for the select_max function."""

    def test_empty_sequence(self):
        assert select_max([]) == 0.0
        assert select_max(()) == 0.0
        assert select_max(iter([])) == 0.0

    def test_single_racer(self):
        penguin = Penguin(name="Pingu")
        assert select_max([penguin]) == penguin.speed

    def test_heterogeneous_racers(self):
        racers = mixed_racers()
        assert [r.speed for r in racers] == [10.0, 9.0, 0.0, 42.0, 5015.0, 180.0, 200.0]
        assert select_max(racers) == 5015.0

    def test_sub_range(self):
        racers = mixed_racers()
        assert select_max(racers[1:4]) == 42.0

    def test_sub_range_matches_copy(self):
        racers = mixed_racers()
        for start, stop in [(0, 3), (1, 4), (4, 7), (5, 5), (2, 6)]:
            assert select_max(racers[start:stop]) == select_max(list(racers[start:stop]))

    def test_order_does_not_matter(self):
        racers = [FixedSpeedRacer(s) for s in (3.5, 180.0, 42.0, 0.0)]
        for permutation in itertools.permutations(racers):
            assert select_max(permutation) == 180.0

    def test_adding_slower_racer_keeps_top_speed(self):
        racers = [FixedSpeedRacer(10.0), FixedSpeedRacer(20.0)]
        assert select_max(racers + [FixedSpeedRacer(20.0)]) == 20.0
        assert select_max(racers + [FixedSpeedRacer(1.0)]) == 20.0

    def test_adding_faster_racer_updates_top_speed(self):
        racers = [FixedSpeedRacer(10.0), FixedSpeedRacer(20.0)]
        assert select_max(racers + [FixedSpeedRacer(20.5)]) == 20.5

    def test_negative_speeds_are_not_clamped(self):
        assert select_max([FixedSpeedRacer(-5.0), FixedSpeedRacer(-2.0)]) == -2.0

    def test_integer_speed_returned_as_float(self):
        motorcycle = Motorcycle(name="Giacomo")
        motorcycle.speed = 250
        result = select_max([motorcycle])
        assert result == 250.0
        assert isinstance(result, float)

    def test_does_not_mutate_racers(self):
        racers = mixed_racers()
        before = [r.speed for r in racers]
        select_max(racers)
        select_max(racers)
        assert [r.speed for r in racers] == before

    def test_accepts_generator(self):
        assert select_max(FixedSpeedRacer(s) for s in range(5)) == 4.0


class TestLinearScanSpeedSelector:
    """Test cases for the LinearScanSpeedSelector service."""

    def setup_method(self):
        self.selector = LinearScanSpeedSelector()

    def test_implements_interface(self):
        assert isinstance(self.selector, ISpeedSelector)

    def test_select_max(self):
        assert self.selector.select_max(mixed_racers()) == 5015.0
        assert self.selector.select_max([]) == 0.0

    def test_logs_selection(self, caplog):
        caplog.set_level(logging.DEBUG, logger="racer_playground.service.speed_selector")
        self.selector.select_max([FixedSpeedRacer(7.0)])
        assert "Selected top speed 7.0" in caplog.text


class TestRacerRoster:
    """Test cases for RacerRoster."""

    def setup_method(self):
        self.roster = RacerRoster(mixed_racers())

    def test_sequence_behaviour(self):
        assert len(self.roster) == 7
        assert self.roster[0] is UnladenSwallow.AFRICAN
        assert self.roster[-1].name == "Giacomo"
        assert UnladenSwallow.UNKNOWN in self.roster
        assert list(reversed(self.roster))[0].name == "Giacomo"

    def test_top_speed(self):
        assert self.roster.top_speed() == 5015.0

    def test_slice_is_a_roster(self):
        sub_roster = self.roster[1:4]
        assert isinstance(sub_roster, RacerRoster)
        assert len(sub_roster) == 3
        assert sub_roster.top_speed() == 42.0

    def test_slice_matches_copied_list(self):
        assert self.roster[4:].top_speed() == select_max(list(self.roster)[4:])

    def test_empty_roster(self):
        assert RacerRoster().top_speed() == 0.0
        assert self.roster[3:3].top_speed() == 0.0

    def test_roster_snapshot_is_immutable(self):
        racers = [Penguin(name="Pingu")]
        roster = RacerRoster(racers)
        racers.append(Motorcycle(name="Giacomo"))
        assert len(roster) == 1
        assert roster.top_speed() == 42.0

    def test_reflects_boosts_after_entry(self):
        """The roster holds racers, not speeds, so later boosts count."""
        swift_bird = SwiftBird(version=1.0)
        roster = RacerRoster([swift_bird, Motorcycle(name="Giacomo")])
        assert roster.top_speed() == 1000.0
        swift_bird.boost(500.0)
        assert roster.top_speed() == 1500.0

    def test_rejects_non_racers(self):
        with pytest.raises(NotARacerError, match="object"):
            RacerRoster([Penguin(name="Pingu"), object()])

    def test_non_racer_error_types(self):
        with pytest.raises(TypeError):
            RacerRoster(["not a racer"])
        with pytest.raises(PlaygroundError):
            RacerRoster([42])

    def test_uses_injected_selector(self):
        selector = Mock(spec=ISpeedSelector)
        selector.select_max.return_value = 99.0
        roster = RacerRoster([Penguin(name="Pingu")], selector=selector)

        assert roster.top_speed() == 99.0
        assert roster[:1].top_speed() == 99.0
        assert selector.select_max.call_count == 2

    def test_accepts_structural_selector(self):
        """Any object with select_max works, no ISpeedSelector base needed."""

        class SlowestSpeedSelector:
            def select_max(self, racers):
                return min((racer.speed for racer in racers), default=0.0)

        selector = SlowestSpeedSelector()
        assert not isinstance(selector, ISpeedSelector)
        assert isinstance(selector, SpeedSelectorProtocol)

        roster = RacerRoster(mixed_racers(), selector=selector)
        assert roster.top_speed() == 0.0
        assert roster[3:5].top_speed() == 42.0
