import logging
from typing import ClassVar

from cyrcipher.core.exceptions import TransposeCipherError
from cyrcipher.models.schemas import CipherFamily, CipherType, ErrorKind
from cyrcipher.services.engines.base import CipherEngine
from cyrcipher.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)

# Marks a cell that never received a character; spaces are real content
BLANK = None

Table = list[list[str | None]]


@EngineRegistry.register
class TransposeCipher(CipherEngine):
    """
    Route transposition cipher engine.

    The text is written into a table row by row, left to right, and read
    out column by column, right to left, top to bottom. The key is the
    number of columns.

    Example with 3 columns and "ПРИВЕТМИР":

            П Р И
            В Е Т
            М И Р

    Read columns 3, 2, 1: ИТР, РЕИ, ПВМ -> ИТРРЕИПВМ

    When the last row is incomplete its unused cells stay blank. They
    are skipped on encryption and never written on decryption, so the
    ciphertext is exactly as long as the plaintext.
    """

    name = "Route Transposition Cipher"
    cipher_type = CipherType.ROUTE
    cipher_family = CipherFamily.TRANSPOSITION
    description = (
        "A transposition cipher where plaintext is written into a table by "
        "rows and read out by columns from right to left. The key is the "
        "number of columns."
    )

    MAX_COLUMNS: ClassVar[int] = 1000
    MAX_ROWS: ClassVar[int] = 10000

    def __init__(self, num_columns: int):
        if isinstance(num_columns, bool) or not isinstance(num_columns, int) or num_columns <= 0:
            raise TransposeCipherError(
                "Key must be a positive integer",
                ErrorKind.INVALID_KEY,
                {"key": num_columns},
            )
        if num_columns > self.MAX_COLUMNS:
            raise TransposeCipherError(
                f"Key is too large. Maximum value: {self.MAX_COLUMNS}",
                ErrorKind.KEY_TOO_LARGE,
                {"key": num_columns, "max_key": self.MAX_COLUMNS},
            )

        self._num_columns = num_columns
        logger.debug("Route transposition with %d columns", num_columns)

    @classmethod
    def parse_key(cls, raw_key: str) -> int:
        """
        Parse a column count typed by the user.

        Only plain decimal digits are accepted, so "3.14", "12abc" and
        "-5" are all rejected here with the same error kind.
        """
        key_str = raw_key.strip()
        if not key_str:
            raise TransposeCipherError(
                "Key must not be empty",
                ErrorKind.INVALID_KEY,
                {"key": raw_key},
            )
        if not (key_str.isascii() and key_str.isdigit()):
            raise TransposeCipherError(
                f"Key must be a positive integer, got '{key_str}'",
                ErrorKind.INVALID_KEY,
                {"key": raw_key},
            )
        return int(key_str)

    @property
    def num_columns(self) -> int:
        return self._num_columns

    @property
    def key_display(self) -> str:
        return str(self._num_columns)

    def encrypt(self, plaintext: str) -> str:
        """Write by rows, read by columns from right to left."""
        table = self.build_table(plaintext)

        result = []
        for col in range(self._num_columns - 1, -1, -1):
            for row in table:
                if row[col] is not BLANK:
                    result.append(row[col])

        logger.debug("Encrypted %d characters in %d rows", len(plaintext), len(table))
        return "".join(result)

    def decrypt(self, ciphertext: str) -> str:
        """Write by columns from right to left, read by rows."""
        num_rows = self._check_text(ciphertext, "ciphertext")
        length = len(ciphertext)

        last_row_length = length % self._num_columns
        if last_row_length == 0:
            last_row_length = self._num_columns

        table: Table = [[BLANK] * self._num_columns for _ in range(num_rows)]

        index = 0
        for col in range(self._num_columns - 1, -1, -1):
            for row in range(num_rows):
                if row == num_rows - 1 and col >= last_row_length:
                    continue
                table[row][col] = ciphertext[index]
                index += 1

        logger.debug("Decrypted %d characters in %d rows", length, num_rows)
        return "".join(cell for row in table for cell in row if cell is not BLANK)

    def build_table(self, plaintext: str) -> Table:
        """
        Write the plaintext into the encryption table.

        Args:
            plaintext: The text to lay out

        Returns:
            Rows of the table; unused cells of the last row are None
        """
        num_rows = self._check_text(plaintext, "plaintext")

        table: Table = [[BLANK] * self._num_columns for _ in range(num_rows)]
        for index, char in enumerate(plaintext):
            row, col = divmod(index, self._num_columns)
            table[row][col] = char
        return table

    def explain(self, source: str, result: str) -> str:
        """Generate human-readable explanation."""
        num_rows = (len(source) + self._num_columns - 1) // self._num_columns
        return (
            f"Route transposition with {self._num_columns} columns and "
            f"{num_rows} rows. The text was written row by row from left to "
            f"right and read column by column from right to left, top to bottom."
        )

    def _check_text(self, text: str, label: str) -> int:
        """Validate text against the key and return the number of table rows."""
        if not text:
            raise TransposeCipherError(
                f"Empty {label}",
                ErrorKind.EMPTY_TEXT,
            )

        for position, char in enumerate(text):
            if not char.isalpha() and char != " ":
                raise TransposeCipherError(
                    f"The {label} may contain only letters and spaces",
                    ErrorKind.INVALID_TEXT_CHARACTER,
                    {"character": char, "position": position},
                )

        length = len(text)
        if self._num_columns > length:
            raise TransposeCipherError(
                f"Key cannot be greater than the {label} length",
                ErrorKind.KEY_EXCEEDS_TEXT_LENGTH,
                {"key": self._num_columns, "length": length},
            )

        num_rows = (length + self._num_columns - 1) // self._num_columns
        if num_rows > self.MAX_ROWS:
            raise TransposeCipherError(
                "Table is too large",
                ErrorKind.TABLE_TOO_LARGE,
                {"rows": num_rows, "max_rows": self.MAX_ROWS},
            )
        return num_rows
