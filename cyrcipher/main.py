import typer
from rich.console import Console
from rich.table import Table

from cyrcipher.core.config import get_settings
from cyrcipher.core.exceptions import CipherError
from cyrcipher.core.log import configure_logging
from cyrcipher.models.schemas import (
    ERROR_DESCRIPTIONS,
    CipherRequest,
    CipherType,
    Operation,
)
from cyrcipher.services.engines.base import CipherEngine
from cyrcipher.services.engines.registry import EngineRegistry
from cyrcipher.services.engines.transposition.route import TransposeCipher
from cyrcipher.services.preprocessing.normalizer import TextNormalizer
from cyrcipher.services.processor import CipherProcessor

settings = get_settings()

app = typer.Typer(help="Gronsfeld and route transposition ciphers for Russian text.")


@app.callback()
def _init(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log engine activity to stderr."),
):
    configure_logging("DEBUG" if verbose else settings.effective_log_level)


def _report_error(error: CipherError) -> None:
    typer.echo(f"Error: {error.message}", err=True)
    typer.echo(f"  kind: {error.kind.value}", err=True)


def _run(
    operation: Operation,
    cipher: CipherType,
    key: str,
    text: str,
    as_json: bool,
    explain: bool,
) -> None:
    request = CipherRequest(cipher_type=cipher, operation=operation, key=key, text=text)

    try:
        response = CipherProcessor().run(request, explain=explain)
    except CipherError as e:
        if as_json:
            typer.echo(e.to_response().model_dump_json(indent=2))
        else:
            _report_error(e)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(response.model_dump_json(indent=2))
        return

    typer.echo(response.output_text)
    if response.explanation:
        typer.echo(response.explanation)


@app.command()
def encrypt(
    text: str = typer.Argument(..., help="Plaintext: letters and spaces."),
    key: str = typer.Option(..., "--key", "-k", help="Keyword (gronsfeld) or column count (route)."),
    cipher: CipherType = typer.Option(settings.default_cipher, "--cipher", "-c"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON document."),
    explain: bool = typer.Option(False, "--explain", help="Describe what the cipher did."),
):
    """Encrypt text with a known key."""
    _run(Operation.ENCRYPT, cipher, key, text, as_json, explain)


@app.command()
def decrypt(
    text: str = typer.Argument(..., help="Ciphertext: letters and spaces."),
    key: str = typer.Option(..., "--key", "-k", help="Keyword (gronsfeld) or column count (route)."),
    cipher: CipherType = typer.Option(settings.default_cipher, "--cipher", "-c"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON document."),
    explain: bool = typer.Option(False, "--explain", help="Describe what the cipher did."),
):
    """Decrypt text with a known key."""
    _run(Operation.DECRYPT, cipher, key, text, as_json, explain)


@app.command()
def table(
    text: str = typer.Argument(..., help="Text to lay out."),
    columns: int = typer.Option(..., "--columns", "-n", help="Number of table columns."),
):
    """Show the route transposition table for a text."""
    try:
        engine = TransposeCipher(columns)
        rows = engine.build_table(TextNormalizer().normalize(text))
    except CipherError as e:
        _report_error(e)
        raise typer.Exit(code=1)

    grid = Table(show_header=True, show_lines=True)
    for col in range(engine.num_columns):
        grid.add_column(str(col + 1), justify="center")
    for row in rows:
        # Spaces are shown as a middle dot so they stay visible
        grid.add_row(*("" if cell is None else cell.replace(" ", "·") for cell in row))
    Console().print(grid)


@app.command()
def errors():
    """List the kinds of errors the ciphers report."""
    for kind, description in ERROR_DESCRIPTIONS.items():
        typer.echo(f"{kind.value:<26} {description}")


def _demo_case(cipher: CipherType, key: str, text: str) -> None:
    typer.echo(f"{cipher.value}  key='{key}'  text='{text}'")
    try:
        engine = EngineRegistry().create(cipher, key)
        encrypted = engine.encrypt(text)
        decrypted = engine.decrypt(encrypted)
    except CipherError as e:
        typer.echo(f"  error [{e.kind.value}]: {e.message}")
        return

    typer.echo(f"  encrypted: {encrypted}")
    typer.echo(f"  decrypted: {decrypted}")


DEMO_CASES: list[tuple[CipherType, str, str]] = [
    (CipherType.GRONSFELD, "ДОЖДИ", "ТИМПЛБДВА"),
    (CipherType.GRONSFELD, "СЕВЕР", "ШИФРГРОНСФЕЛЬДА"),
    (CipherType.GRONSFELD, "КИТ", "ИСКЛЮЧЕНИЯ"),
    (CipherType.GRONSFELD, "АЛГОРИТМ", "ПРОГРАММИРОВАНИЕ"),
    (CipherType.GRONSFELD, "КОД", "ПРИВЕТ МИР"),
    (CipherType.GRONSFELD, "", "ТЕКСТ"),
    (CipherType.GRONSFELD, "КЛЮЧ458", "ТЕКСТ"),
    (CipherType.GRONSFELD, "КЛЮЧ", ""),
    (CipherType.GRONSFELD, "КЛЮЧ", "ТЕКСТ895"),
    (CipherType.GRONSFELD, "KEY", "TEXT"),
    (CipherType.GRONSFELD, "КЛЮЧ", "TEXT"),
    (CipherType.GRONSFELD, "КЛЮЧ", "ТЕКСТ!"),
    (CipherType.ROUTE, "3", "ПРИВЕТМИР"),
    (CipherType.ROUTE, "4", "ПРИВЕТ МИР"),
    (CipherType.ROUTE, "-5", "ПРИВЕТМИР"),
    (CipherType.ROUTE, "3", ""),
    (CipherType.ROUTE, "10", "ПРИВЕТ"),
    (CipherType.ROUTE, "2000", "ПРИВЕТМИР"),
]


@app.command()
def demo():
    """Run both ciphers on a set of valid and invalid inputs."""
    for cipher, key, text in DEMO_CASES:
        _demo_case(cipher, key, text)


MENU = """
1. Encrypt text
2. Decrypt text
3. Help
4. Exit"""


def _help_text(cipher: CipherType) -> str:
    if cipher == CipherType.ROUTE:
        return (
            "Route transposition cipher\n"
            " Key: number of table columns, 1 to 1000, not greater than the text length\n"
            " Write: by rows, left to right, top to bottom\n"
            " Read: by columns, top to bottom, right to left\n"
            " Text: letters and spaces only"
        )
    return (
        "Gronsfeld cipher\n"
        " Key: a word; each Russian letter becomes a shift equal to its alphabet position\n"
        " Text: letters and spaces only; spaces and non-Russian letters are dropped\n"
        " Output: upper-case Russian letters"
    )


def _prompt_engine(cipher: CipherType) -> CipherEngine:
    registry = EngineRegistry()
    normalizer = TextNormalizer()
    while True:
        raw_key = typer.prompt("Key", default="", show_default=False)
        try:
            return registry.create(cipher, normalizer.normalize(raw_key))
        except CipherError as e:
            _report_error(e)
            typer.echo("Please enter the key again.")


def _menu_operation(cipher: CipherType, operation: Operation) -> None:
    engine = _prompt_engine(cipher)
    text = TextNormalizer().normalize(
        typer.prompt(f"Text to {operation.value}", default="", show_default=False)
    )
    try:
        if operation == Operation.ENCRYPT:
            result = engine.encrypt(text)
        else:
            result = engine.decrypt(text)
    except CipherError as e:
        _report_error(e)
        return
    typer.echo(f"Result: {result}")


@app.command()
def menu(
    cipher: CipherType = typer.Option(settings.default_cipher, "--cipher", "-c"),
):
    """Interactive menu: encrypt, decrypt and help until exit."""
    typer.echo(f"{settings.app_name}: {cipher.value}")

    while True:
        typer.echo(MENU)
        choice = typer.prompt("Choose an action", default="", show_default=False).strip()

        if choice == "1":
            _menu_operation(cipher, Operation.ENCRYPT)
        elif choice == "2":
            _menu_operation(cipher, Operation.DECRYPT)
        elif choice == "3":
            typer.echo(_help_text(cipher))
        elif choice == "4":
            typer.echo("Goodbye!")
            break
        else:
            typer.echo("Invalid choice. Enter a number from 1 to 4.")


def main():
    app()


if __name__ == "__main__":
    main()
