"""End-to-end tests of the demonstration output."""

import sys
from collections.abc import Callable

import pytest

from patterns_demo.__main__ import main
from patterns_demo.config import AppConfig

EXPECTED_OUTPUT = """\
=== Factory Method ===
I am an Administrator.
I am a Guest.
I am a Manager.

=== Composite (File System) ===
-Root
---Documents
-----Resume.docx
-----Report.pdf
---Images
-----photo1.jpg
-----logo.png
---README.txt
"""

EXPECTED_ENCRYPTION_OUTPUT = """
=== Strategy (Encryption) ===
Encryption strategy not set.
Original: Hello
Encrypted: SGVsbG8=
Original: Hello
Encrypted: Ej82NjU=
Original: Hello
Encrypted: olleH
"""


@pytest.fixture
def run_main(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> Callable[..., str]:
    """Run the entry point with the given arguments and return its stdout."""

    def _run(*args: str) -> str:
        monkeypatch.setattr(sys, "argv", ["patterns-demo", "--env-file", "", *args])
        main()
        return capsys.readouterr().out

    return _run


def test_default_output(run_main: Callable[..., str]) -> None:
    """Without arguments only the factory and composite sections are printed."""
    assert run_main() == EXPECTED_OUTPUT


def test_output_with_encryption(
    run_main: Callable[..., str], monkeypatch: pytest.MonkeyPatch
) -> None:
    """The encryption section follows when requested."""
    monkeypatch.setenv("DEMO_TEXT", "Hello")

    assert run_main("--with-encryption") == EXPECTED_OUTPUT + EXPECTED_ENCRYPTION_OUTPUT


def test_encryption_enabled_from_environment(
    run_main: Callable[..., str], monkeypatch: pytest.MonkeyPatch
) -> None:
    """SHOW_ENCRYPTION turns the encryption section on."""
    monkeypatch.setenv("SHOW_ENCRYPTION", "true")

    assert "=== Strategy (Encryption) ===" in run_main()


def test_astral_demo_text(
    run_main: Callable[..., str], monkeypatch: pytest.MonkeyPatch
) -> None:
    """Reversed emoji are printed with replacement characters."""
    monkeypatch.setenv("DEMO_TEXT", "a\U0001f600")

    out = run_main("--with-encryption")

    assert out.splitlines()[-1] == "Encrypted: \ufffd\ufffda"


def test_run_demo_respects_config(capsys: pytest.CaptureFixture[str]) -> None:
    """run_demo honours the configured text and key."""
    from patterns_demo import run_demo

    run_demo(
        AppConfig(
            logging_level=None,
            show_encryption=True,
            demo_text="A",
            xor_key=0x5A,
        )
    )

    lines = capsys.readouterr().out.splitlines()
    assert "Encrypted: Gw==" in lines
    assert lines[-2:] == ["Original: A", "Encrypted: A"]
