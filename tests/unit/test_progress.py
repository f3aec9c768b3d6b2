from __future__ import annotations

import sys
from unittest.mock import Mock, patch

from onesecond.services.progress import CaseProgressTracker, is_tty_enabled


def test_is_tty_enabled_follows_stderr():
    with patch('sys.stderr.isatty', return_value=True):
        assert is_tty_enabled() is True

    with patch('sys.stderr.isatty', return_value=False):
        assert is_tty_enabled() is False


class TestCaseProgressTracker:
    """Test cases for CaseProgressTracker class."""

    def test_init_with_tty_enabled(self):
        with patch('onesecond.services.progress.is_tty_enabled', return_value=True), \
             patch('onesecond.services.progress.tqdm') as mock_tqdm:

            tracker = CaseProgressTracker(5, description="Cases")

            assert tracker.total_cases == 5
            assert tracker.current_case == 0
            assert tracker.enabled is True
            mock_tqdm.assert_called_once_with(
                total=5,
                desc="Cases",
                unit="case",
                file=sys.stderr,
                leave=False,
                position=0,
                ncols=80,
                ascii=True,
            )

    def test_init_with_tty_disabled(self):
        with patch('onesecond.services.progress.is_tty_enabled', return_value=False):
            tracker = CaseProgressTracker(5)
            assert tracker.enabled is False
            assert tracker.pbar is None

    def test_start_and_finish_case_with_tty_enabled(self):
        mock_pbar = Mock()
        with patch('onesecond.services.progress.is_tty_enabled', return_value=True), \
             patch('onesecond.services.progress.tqdm', return_value=mock_pbar):

            tracker = CaseProgressTracker(3, description="Running")
            tracker.start_case("Parse    bad numbers")

            assert tracker.current_case == 1
            mock_pbar.set_description.assert_called_with("Running (Parse bad numbers)")

            tracker.finish_case()
            mock_pbar.update.assert_called_once_with(1)
            mock_pbar.set_description.assert_called_with("Running")

    def test_start_case_with_tty_disabled(self):
        with patch('onesecond.services.progress.is_tty_enabled', return_value=False):
            tracker = CaseProgressTracker(3)
            tracker.start_case("anything")
            tracker.finish_case()
            assert tracker.current_case == 1

    def test_write_without_bar_prints_to_stdout(self, capsys):
        with patch('onesecond.services.progress.is_tty_enabled', return_value=False):
            tracker = CaseProgressTracker(1)
            tracker.write("label : 3")
        assert capsys.readouterr().out == "label : 3\n"

    def test_write_with_bar_goes_through_tqdm_write(self):
        mock_tqdm = Mock()
        with patch('onesecond.services.progress.is_tty_enabled', return_value=True), \
             patch('onesecond.services.progress.tqdm', mock_tqdm):
            tracker = CaseProgressTracker(1)
            tracker.write("label : 3")
        mock_tqdm.write.assert_called_once_with("label : 3", file=sys.stdout)

    def test_context_manager_closes_bar(self):
        mock_pbar = Mock()
        with patch('onesecond.services.progress.is_tty_enabled', return_value=True), \
             patch('onesecond.services.progress.tqdm', return_value=mock_pbar):
            with CaseProgressTracker(2) as tracker:
                assert tracker.pbar is mock_pbar
        mock_pbar.close.assert_called_once()
        assert tracker.pbar is None
