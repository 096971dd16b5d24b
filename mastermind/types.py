"""
Labels for clarity.
"""

from typing import List, Literal, Tuple

Digit = int  # 1 -> 6
Code = List[Digit]  # 4 digit secret or guess
DigitRange = Tuple[int, int]  # inclusive (low, high)
GameStatus = Literal["in_progress", "won"]

CODE_LENGTH = 4
DIGIT_RANGE: DigitRange = (1, 6)
