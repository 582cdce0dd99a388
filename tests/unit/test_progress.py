from __future__ import annotations

from unittest.mock import Mock, patch

from oilforms.services.progress import SheetProgressIndicator, is_tty_enabled


def test_is_tty_enabled_returns_stdout_isatty():
    with patch('sys.stdout.isatty', return_value=True):
        assert is_tty_enabled() is True
    with patch('sys.stdout.isatty', return_value=False):
        assert is_tty_enabled() is False


def test_indicator_disabled_without_tty():
    with patch('oilforms.services.progress.is_tty_enabled', return_value=False), \
         patch('oilforms.services.progress.tqdm') as mock_tqdm:
        with SheetProgressIndicator("book.xlsx", 3) as ind:
            ind.start_sheet("A")
            ind.finish_sheet(rows_processed=4)
        mock_tqdm.assert_not_called()
        assert ind.pbar is None
        assert ind.current_sheet == 1
        assert ind.records == 4


def test_indicator_with_tty_updates_bar():
    mock_pbar = Mock()
    with patch('oilforms.services.progress.is_tty_enabled', return_value=True), \
         patch('oilforms.services.progress.tqdm', return_value=mock_pbar) as mock_tqdm:
        ind = SheetProgressIndicator("book.xlsx", 2)
        mock_tqdm.assert_called_once_with(
            total=2,
            desc="book.xlsx",
            unit="sheet",
            leave=False,
            ncols=80,
            ascii=True,
        )
        ind.start_sheet("Power Transformer")
        mock_pbar.set_description.assert_called_with("book.xlsx (Power Transformer)")
        ind.finish_sheet(rows_processed=5)
        mock_pbar.update.assert_called_once_with(1)
        mock_pbar.set_postfix.assert_called_once_with(records=5)
        ind.close()
        mock_pbar.close.assert_called_once()
        assert ind.pbar is None
        # closing twice is harmless
        ind.close()
        mock_pbar.close.assert_called_once()
