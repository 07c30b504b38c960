"""Integration tests for the RemovePart use case."""

import pytest

from pcinv.application.remove_part import RemovePartHandler
from pcinv.domain.exceptions import EntityNotFoundError, PartNotFoundError
from pcinv.domain.model.machine import Machine
from tests.fakes import FakeMachineRepository, make_board


def _setup():
    machine = Machine("Workstation")
    board = make_board("m1")
    machine.add_part(board)
    return FakeMachineRepository([machine]), board


class TestRemovePart:

    def test_remove_returns_part_and_saves(self):
        repo, board = _setup()

        removed = RemovePartHandler(repo).handle("Workstation", "m1")

        assert removed is board
        assert len(repo.get_by_name("Workstation")) == 0
        assert repo.saved == ["Workstation"]

    def test_remove_unknown_part_rejected(self):
        repo, _ = _setup()
        with pytest.raises(PartNotFoundError):
            RemovePartHandler(repo).handle("Workstation", "m2")
        assert len(repo.get_by_name("Workstation")) == 1
        assert repo.saved == []

    def test_remove_twice_rejected(self):
        repo, _ = _setup()
        handler = RemovePartHandler(repo)
        handler.handle("Workstation", "m1")
        with pytest.raises(PartNotFoundError):
            handler.handle("Workstation", "m1")

    def test_unknown_machine_rejected(self):
        repo, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Machine not found"):
            RemovePartHandler(repo).handle("Server", "m1")

    def test_removed_board_keeps_its_counters(self):
        repo, board = _setup()
        board.set_used_ram_slots(2)
        removed = RemovePartHandler(repo).handle("Workstation", "m1")
        assert removed.used_ram_slots == 2
