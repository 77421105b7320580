"""Text-to-speech engines driven through external programs.

Each engine implements the :class:`Speaker` port; nothing in the
extraction pipeline depends on this module.
"""

from __future__ import annotations

import logging
import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class SpeechError(Exception):
    """The speech program could not be started or failed."""


class Speaker(Protocol):
    def speak(self, text: str) -> None: ...


def _run(cmd: list[str], stdin: str | None = None) -> None:
    logger.debug("Running %s", cmd)
    try:
        subprocess.run(cmd, input=stdin, text=True, check=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        raise SpeechError(f"{cmd[0]} failed: {exc}") from exc


@dataclass(frozen=True)
class Festival:
    language: str | None = None

    def command(self) -> list[str]:
        cmd = ["festival"]
        if self.language:
            cmd += ["--language", self.language]
        return cmd + ["--tts"]

    def speak(self, text: str) -> None:
        _run(self.command(), stdin=text)


@dataclass(frozen=True)
class Espeak:
    language: str | None = None
    speed: str | None = None

    def command(self) -> list[str]:
        cmd = ["espeak"]
        if self.language:
            cmd += ["-v", self.language]
        if self.speed:
            cmd += ["-s", self.speed]
        return cmd + ["--stdin"]

    def speak(self, text: str) -> None:
        _run(self.command(), stdin=text)


@dataclass(frozen=True)
class Pico2Wave:
    """pico2wave can only write a file, so the audio is played with aplay."""

    language: str | None = None

    def command(self, wav: Path, text: str) -> list[str]:
        cmd = ["pico2wave"]
        if self.language:
            cmd += ["-l", self.language]
        return cmd + ["-w", str(wav), text]

    def speak(self, text: str) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            wav = Path(tmp_dir) / "message.wav"
            _run(self.command(wav, text))
            _run(["aplay", str(wav)])


ENGINES = ("festival", "espeak", "pico2wave")


def create_speaker(
    engine: str,
    language: str | None = None,
    speed: str | None = None,
) -> Speaker:
    """Return the speaker for *engine*; *speed* only applies to espeak."""
    if engine == "festival":
        return Festival(language=language)
    if engine == "espeak":
        return Espeak(language=language, speed=speed)
    if engine == "pico2wave":
        return Pico2Wave(language=language)
    msg = f"Unknown text-to-speech engine: {engine!r}"
    raise ValueError(msg)
