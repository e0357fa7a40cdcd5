from __future__ import annotations

from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from cart_parser.models.cart import Cart, CartItem
from cart_parser.models.cart_file import CartFile, FileStatus
from cart_parser.models.validation_error import ErrorType, ValidationError
from cart_parser.services.progress import ProgressTracker, is_tty_enabled


def _ok(name: str, n_items: int) -> CartFile:
    items = [CartItem(id=str(i), name="a", price=1.0, quantity=1.0) for i in range(n_items)]
    return CartFile(path=Path(name), name=name, status=FileStatus.SUCCESS, cart=Cart(items=items, total=float(n_items)))


def _failed(name: str, n_errors: int) -> CartFile:
    errors = [ValidationError(ErrorType.ROW, i + 1, -1, "x") for i in range(n_errors)]
    return CartFile(path=Path(name), name=name, status=FileStatus.FAILED, errors=errors)


def test_is_tty_enabled_returns_stdout_isatty():
    with patch('sys.stdout.isatty', return_value=True):
        assert is_tty_enabled() is True

    with patch('sys.stdout.isatty', return_value=False):
        assert is_tty_enabled() is False


@pytest.mark.parametrize("tty", [True, False])
def test_bar_disabled_outside_tty(tty: bool):
    with patch('cart_parser.services.progress.is_tty_enabled', return_value=tty), \
         patch('cart_parser.services.progress.tqdm') as mock_tqdm:

        ProgressTracker(5, description="Test files")

        _, kwargs = mock_tqdm.call_args
        assert kwargs["total"] == 5
        assert kwargs["desc"] == "Test files"
        assert kwargs["unit"] == "file"
        assert kwargs["disable"] is (not tty)


def test_tallies_follow_file_outcomes():
    with patch('cart_parser.services.progress.is_tty_enabled', return_value=False):
        tracker = ProgressTracker(3)
        tracker.finish_file(_ok("a.csv", 2))
        tracker.finish_file(_failed("b.csv", 3))
        tracker.finish_file(_ok("c.csv", 1))

    assert tracker.succeeded == 2
    assert tracker.failed == 1
    assert tracker.items == 3
    assert tracker.errors == 3
    assert tracker.finished == 3


def test_bar_shows_current_file_and_counts():
    mock_pbar = Mock()

    with patch('cart_parser.services.progress.tqdm', return_value=mock_pbar):
        tracker = ProgressTracker(2, description="Parsing")
        tracker.start_file("cart.csv")
        mock_pbar.set_description.assert_called_with("Parsing [cart.csv]")

        tracker.finish_file(_failed("cart.csv", 2))

    mock_pbar.set_description.assert_called_with("Parsing")
    mock_pbar.set_postfix.assert_called_once_with(ok=0, failed=1, items=0, errors=2)
    mock_pbar.update.assert_called_once_with(1)


def test_context_manager_closes_bar():
    mock_pbar = Mock()

    with patch('cart_parser.services.progress.tqdm', return_value=mock_pbar):
        with ProgressTracker(1):
            pass

    mock_pbar.close.assert_called_once()
