"""Runs the external SoX binary over Telegram voice notes."""

from __future__ import annotations

import asyncio
import logging
from typing import Mapping, Sequence

from voicefx.config.settings import Settings

logger = logging.getLogger(__name__)

# opus on stdin, ogg on stdout
BASE_ARGS: tuple[str, ...] = ("-t", "opus", "-", "-t", "ogg", "-")
FALLBACK_PRESET: tuple[str, ...] = ("speed", "1.0")


class ConversionError(RuntimeError):
    """Raised when the converter process fails or cannot be started."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        self.returncode = returncode
        super().__init__(message)


class SoxConverter:
    """Pipes raw audio through ``sox`` with the arguments of a named preset.

    Equivalent to::

        $ cat original.oga | sox -t opus - -t ogg - speed 2.0 > converted.ogg
    """

    def __init__(
        self,
        binary: str,
        presets: Mapping[str, Sequence[str]],
        *,
        verbose: bool = False,
    ) -> None:
        self._binary = binary
        self._presets = presets
        self._verbose = verbose

    @classmethod
    def from_settings(cls, settings: Settings) -> "SoxConverter":
        return cls(settings.sox_bin, settings.presets, verbose=settings.is_verbose)

    def preset_args(self, preset: str) -> tuple[str, ...]:
        """Return the preset's arguments, or the pass-through fallback when unknown."""

        args = self._presets.get(preset)
        if args is None:
            return FALLBACK_PRESET
        return tuple(args)

    def build_args(self, preset: str) -> list[str]:
        """Full argument list passed after the binary path."""

        return [*BASE_ARGS, *self.preset_args(preset)]

    async def convert(self, original: bytes, preset: str) -> bytes:
        """Return ``original`` transformed with ``preset``.

        Raises :class:`ConversionError` with the captured stdout and stderr when the
        process exits with a non-zero status, or with the OS error when it cannot be
        spawned at all.
        """

        if self._verbose:
            logger.debug("Received %d bytes of audio", len(original))

        args = self.build_args(preset)
        try:
            process = await asyncio.create_subprocess_exec(
                self._binary,
                *args,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            stdout, stderr = await process.communicate(original)
        except OSError as exc:
            raise ConversionError(f"Cannot run {self._binary}: {exc}") from exc

        if process.returncode != 0:
            out_text = stdout.decode("utf-8", errors="replace")
            err_text = stderr.decode("utf-8", errors="replace")
            logger.debug("%s exited with %s", self._binary, process.returncode)
            raise ConversionError(f"{out_text} {err_text}", returncode=process.returncode)

        return stdout
