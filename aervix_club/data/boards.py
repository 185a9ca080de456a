from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

@dataclass(frozen=True)
class BoardSpecs:
    microcontroller: str
    operating_voltage: str
    input_voltage: str
    digital_io: str
    analog_input: str
    flash_memory: str

@dataclass(frozen=True)
class Board:
    board_id: str      # referenced by BoardTask.board_id
    name: str
    description: str
    image: str
    specs: BoardSpecs

BOARDS: Tuple[Board, ...] = (
    Board(
        board_id="uno",
        name="Arduino Uno",
        description="The standard and most popular board for beginners. Robust and versatile.",
        image="https://picsum.photos/seed/arduino-uno/400/300",
        specs=BoardSpecs(
            microcontroller="ATmega328P",
            operating_voltage="5V",
            input_voltage="7-12V",
            digital_io="14 (of which 6 provide PWM output)",
            analog_input="6",
            flash_memory="32 KB",
        ),
    ),
    Board(
        board_id="nano",
        name="Arduino Nano",
        description="A small, complete, and breadboard-friendly board based on the ATmega328.",
        image="https://picsum.photos/seed/arduino-nano/400/300",
        specs=BoardSpecs(
            microcontroller="ATmega328",
            operating_voltage="5V",
            input_voltage="7-12V",
            digital_io="14",
            analog_input="8",
            flash_memory="32 KB",
        ),
    ),
    Board(
        board_id="mega",
        name="Arduino Mega 2560",
        description="Designed for more complex projects with more pins and more memory.",
        image="https://picsum.photos/seed/arduino-mega/400/300",
        specs=BoardSpecs(
            microcontroller="ATmega2560",
            operating_voltage="5V",
            input_voltage="7-12V",
            digital_io="54 (of which 15 provide PWM output)",
            analog_input="16",
            flash_memory="256 KB",
        ),
    ),
    Board(
        board_id="leonardo",
        name="Arduino Leonardo",
        description=(
            "A board that has built-in USB communication, "
            "allowing it to act as a keyboard or mouse."
        ),
        image="https://picsum.photos/seed/arduino-leo/400/300",
        specs=BoardSpecs(
            microcontroller="ATmega32u4",
            operating_voltage="5V",
            input_voltage="7-12V",
            digital_io="20",
            analog_input="12",
            flash_memory="32 KB",
        ),
    ),
)

_BY_ID: Dict[str, Board] = {b.board_id: b for b in BOARDS}

def get_board(board_id: str) -> Optional[Board]:
    return _BY_ID.get(board_id)
