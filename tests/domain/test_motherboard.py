"""Unit tests for the Motherboard slot counters."""

import pytest

from pcinv.domain.exceptions import CapacityExceededError, ValidationError
from pcinv.domain.model.hardware import CPUSocket, RAMType
from pcinv.domain.model.metadata import PartKind, PartMetadata
from pcinv.domain.model.motherboard import Motherboard
from pcinv.domain.model.value_objects import PartId
from tests.fakes import make_board


class TestMotherboardCreation:

    def test_starts_with_no_slots_used(self):
        board = make_board(ram_slots=4, pci_slots=2)
        assert board.used_ram_slots == 0
        assert board.used_pci_slots == 0
        assert board.free_ram_slots == 4
        assert board.free_pci_slots == 2

    def test_descriptive_attributes(self):
        board = make_board()
        assert board.id == PartId("m1")
        assert board.kind == PartKind.MOTHERBOARD
        assert board.socket == CPUSocket.AM4
        assert board.ram_type == RAMType.DDR4
        assert board.chipset == "B550"

    def test_zero_capacity_allowed(self):
        board = make_board(ram_slots=0, pci_slots=0)
        board.set_used_ram_slots(0)
        assert board.used_ram_slots == 0

    def test_negative_capacity_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            make_board(ram_slots=-1)

    def test_non_integer_capacity_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Motherboard(
                metadata=PartMetadata("B550", "ASUS"),
                socket=CPUSocket.AM4,
                chipset="B550",
                ram_type=RAMType.DDR4,
                ram_slots="4",
                pci_slots=2,
            )

    def test_socket_and_ram_type_text_is_coerced(self):
        board = Motherboard(
            metadata=PartMetadata("B550", "ASUS", part_id="m1"),
            socket="am4",
            chipset="B550",
            ram_type="DDR4",
            ram_slots=4,
            pci_slots=2,
        )
        assert board.socket == CPUSocket.AM4
        assert board.ram_type == RAMType.DDR4
        assert "socket=AM4" in repr(board)
        assert "ram_type=DDR4" in repr(board)

    def test_unknown_socket_text_is_other(self):
        board = Motherboard(
            metadata=PartMetadata("Mystery", "Acme"),
            socket="Socket 7",
            chipset="",
            ram_type="HBM3",
            ram_slots=1,
            pci_slots=0,
        )
        assert board.socket == CPUSocket.OTHER
        assert board.ram_type == RAMType.OTHER

    def test_non_enum_socket_rejected(self):
        with pytest.raises(ValidationError, match="Expected a CPUSocket"):
            Motherboard(
                metadata=PartMetadata("B550", "ASUS"),
                socket=1151,
                chipset="B550",
                ram_type=RAMType.DDR4,
                ram_slots=4,
                pci_slots=2,
            )

    def test_capacity_is_read_only(self):
        board = make_board(ram_slots=4)
        with pytest.raises(AttributeError):
            board.ram_slots = 8
        assert board.ram_slots == 4


class TestMotherboardRamSlots:

    def test_set_within_capacity(self):
        board = make_board(ram_slots=4)
        board.set_used_ram_slots(2)
        assert board.used_ram_slots == 2
        assert board.free_ram_slots == 2

    def test_fill_every_slot(self):
        board = make_board(ram_slots=4)
        board.set_used_ram_slots(4)
        assert board.used_ram_slots == 4
        assert board.free_ram_slots == 0

    def test_one_over_capacity_rejected(self):
        board = make_board(ram_slots=4)
        with pytest.raises(CapacityExceededError, match="only has 4") as exc_info:
            board.set_used_ram_slots(5)
        assert exc_info.value.requested == 5
        assert exc_info.value.capacity == 4

    def test_rejected_update_keeps_previous_value(self):
        board = make_board(ram_slots=4)
        board.set_used_ram_slots(3)
        with pytest.raises(CapacityExceededError):
            board.set_used_ram_slots(9)
        assert board.used_ram_slots == 3

    def test_can_lower_usage(self):
        board = make_board(ram_slots=4)
        board.set_used_ram_slots(4)
        board.set_used_ram_slots(1)
        assert board.used_ram_slots == 1

    def test_negative_rejected(self):
        board = make_board(ram_slots=4)
        with pytest.raises(ValidationError, match="cannot be negative"):
            board.set_used_ram_slots(-1)
        assert board.used_ram_slots == 0

    def test_does_not_touch_pci_usage(self):
        board = make_board(ram_slots=4, pci_slots=2)
        board.set_used_pci_slots(1)
        board.set_used_ram_slots(4)
        assert board.used_pci_slots == 1


class TestMotherboardPciSlots:

    def test_fill_every_slot(self):
        board = make_board(pci_slots=2)
        board.set_used_pci_slots(2)
        assert board.used_pci_slots == 2

    def test_one_over_capacity_rejected(self):
        board = make_board(pci_slots=2)
        board.set_used_pci_slots(1)
        with pytest.raises(CapacityExceededError, match="3 PCI slots"):
            board.set_used_pci_slots(3)
        assert board.used_pci_slots == 1

    def test_capacity_error_is_a_validation_error(self):
        board = make_board(pci_slots=2)
        with pytest.raises(ValidationError):
            board.set_used_pci_slots(3)


class TestMotherboardCapacityProperty:

    @pytest.mark.parametrize("capacity", [0, 1, 4, 8])
    def test_set_succeeds_iff_within_capacity(self, capacity):
        for n in range(capacity + 3):
            board = make_board(ram_slots=capacity, pci_slots=capacity)
            if n <= capacity:
                board.set_used_ram_slots(n)
                board.set_used_pci_slots(n)
                assert board.used_ram_slots == n
                assert board.used_pci_slots == n
            else:
                with pytest.raises(CapacityExceededError):
                    board.set_used_ram_slots(n)
                with pytest.raises(CapacityExceededError):
                    board.set_used_pci_slots(n)
                assert board.used_ram_slots == 0
                assert board.used_pci_slots == 0
