"""
fzf adapter - implements PickerProtocol.

Each label is fed to fzf as `<index>\\t<label>` with only the label shown,
so the chosen line maps back to its exact position even when two labels are
identical.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from ws.exceptions import PickerError

__all__ = ['FzfPicker']

FZF_DELIM = '\t'

# 1 = no match, 130 = interrupted with Esc/Ctrl-C
_ABORT_RETURN_CODES = frozenset({1, 130})


class FzfPicker:
    """Full-screen, single-select fzf picker."""

    def __init__(self, binary: str = 'fzf') -> None:
        self.binary = binary

    def _command(self, prompt: str) -> list[str]:
        return [
            self.binary,
            '--no-multi',
            '--height',
            '100%',
            '--layout',
            'reverse',
            '--color',
            'bw',
            '--delimiter',
            FZF_DELIM,
            '--with-nth',
            '2..',
            '--prompt',
            prompt,
        ]

    def pick(self, labels: Sequence[str], prompt: str) -> int | None:
        if not labels:
            return None

        lines = ''.join(f'{i}{FZF_DELIM}{label}\n' for i, label in enumerate(labels))
        try:
            # stderr is inherited: fzf draws its UI on the terminal
            proc = subprocess.run(self._command(prompt), input=lines, stdout=subprocess.PIPE, text=True)
        except OSError as e:
            raise PickerError(f'Failed to run {self.binary}: {e}') from e

        if proc.returncode in _ABORT_RETURN_CODES:
            return None
        if proc.returncode != 0:
            raise PickerError(f'{self.binary} failed (exit code {proc.returncode})')

        selected = proc.stdout.strip('\n')
        if not selected:
            return None

        index_field, _, _ = selected.partition(FZF_DELIM)
        try:
            return int(index_field)
        except ValueError as e:
            raise PickerError(f'Unexpected {self.binary} output: {selected!r}') from e
