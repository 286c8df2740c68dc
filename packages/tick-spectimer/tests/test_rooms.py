"""Tests for tick_spectimer.rooms — raid room table and barriers."""
from __future__ import annotations

from tick_spectimer.rooms import (
    BLOAT,
    MAIDEN,
    NYLOCAS,
    SOTETSEG,
    SOTETSEG_MAZE,
    VERZIK,
    XARPUS,
    Barrier,
    Entry,
    crossed_barrier,
    room_at,
)
from tick_spectimer.types import Position


class TestBarrier:
    def test_open_bounds(self) -> None:
        barrier = Barrier(max_x=10)
        assert barrier.contains(-500, 99999)
        assert not barrier.contains(11, 0)

    def test_closed_range(self) -> None:
        barrier = Barrier(1, 2, 5, 5)
        assert barrier.contains(1, 5)
        assert barrier.contains(2, 5)
        assert not barrier.contains(3, 5)
        assert not barrier.contains(1, 6)


class TestRoomTable:
    def test_room_at(self) -> None:
        assert room_at(12613) is MAIDEN
        assert room_at(12611) is VERZIK
        assert room_at(12869) is None  # lobby
        assert room_at(None) is None

    def test_entry_strategies(self) -> None:
        assert MAIDEN.entry is Entry.REGION
        assert SOTETSEG_MAZE.entry is Entry.REGION
        for room in (BLOAT, NYLOCAS, SOTETSEG, XARPUS):
            assert room.entry is Entry.BARRIER
        assert VERZIK.entry is Entry.NPC
        assert VERZIK.npc_id == 8370


class TestCrossedBarrier:
    def test_bloat_barrier_is_a_line_with_open_west_side(self) -> None:
        assert crossed_barrier(BLOAT, Position(13125, 3303, 4446))
        assert crossed_barrier(BLOAT, Position(13125, 3290, 4449))
        assert not crossed_barrier(BLOAT, Position(13125, 3304, 4447))
        assert not crossed_barrier(BLOAT, Position(13125, 3303, 4450))

    def test_nylocas_barrier(self) -> None:
        assert crossed_barrier(NYLOCAS, Position(13122, 3295, 4254))
        assert crossed_barrier(NYLOCAS, Position(13122, 3296, 4254))
        assert not crossed_barrier(NYLOCAS, Position(13122, 3297, 4254))
        assert not crossed_barrier(NYLOCAS, Position(13122, 3295, 4255))

    def test_sotetseg_and_xarpus_barriers(self) -> None:
        assert crossed_barrier(SOTETSEG, Position(13123, 3280, 4308))
        assert not crossed_barrier(SOTETSEG, Position(13123, 3282, 4308))
        assert crossed_barrier(XARPUS, Position(12612, 3170, 4380))
        assert not crossed_barrier(XARPUS, Position(12612, 3170, 4381))

    def test_other_zone_never_crosses(self) -> None:
        assert not crossed_barrier(BLOAT, Position(13122, 3303, 4446))

    def test_rooms_without_barrier(self) -> None:
        assert not crossed_barrier(MAIDEN, Position(12613, 0, 0))
        assert not crossed_barrier(VERZIK, Position(12611, 0, 0))
