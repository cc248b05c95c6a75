"""Public smoke tests for basic module wiring.

Keep these minimal and free of any real-world data.
"""

from __future__ import annotations


def test_imports() -> None:
    import spendwise
    import spendwise.application.receipts
    import spendwise.chat
    import spendwise.cli.main
    import spendwise.receipt
    import spendwise.runtime

    assert spendwise.__version__
    assert spendwise.application.receipts is not None
    assert spendwise.chat is not None
    assert spendwise.cli.main is not None
    assert spendwise.receipt is not None
    assert spendwise.runtime is not None


def test_get_logger_uses_package_namespace() -> None:
    from spendwise.runtime import get_logger

    assert get_logger("spendwise.chat.parser").name == "spendwise.chat.parser"
    assert get_logger("scripts").name == "spendwise.scripts"
