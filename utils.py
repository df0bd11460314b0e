import math
import wave
from pathlib import Path
from typing import Optional

import numpy as np
from PyQt5 import QtCore
from PyQt5.QtMultimedia import QMediaPlayer, QMediaContent

from CONFIG import *


_audio_players: dict[str, list[QMediaPlayer]] = {}
_sound_effects_dir = Path(__file__).resolve().parent / SOUND_EFFECTS_DIR


def _resolve_audio_path(path: str | Path) -> Path:
    audio_path = Path(path)
    if not audio_path.is_absolute():
        audio_path = Path(__file__).resolve().parent / audio_path
    return audio_path


def _get_or_create_player(path: Path, volume: int) -> QMediaPlayer:
    """Hand out an idle player for this file, so quick repeats overlap instead of cutting off."""
    key = str(path)
    pool = _audio_players.setdefault(key, [])
    player = next((p for p in pool if p.state() != QMediaPlayer.PlayingState), None)
    if player is None and len(pool) < AUDIO_POOL_SIZE:
        player = QMediaPlayer()
        player.setMedia(QMediaContent(QtCore.QUrl.fromLocalFile(key)))
        pool.append(player)
    if player is None:
        # all busy, restart the oldest one
        player = pool.pop(0)
        pool.append(player)
    player.setVolume(volume)
    return player


def pop_sound_samples(sample_rate: int = POP_SOUND_SAMPLE_RATE) -> np.ndarray:
    """Sine that sweeps down from POP_SOUND_FREQUENCY_HZ while fading out, both exponentially."""
    duration = POP_SOUND_DURATION_S
    freq_ratio = POP_SOUND_FLOOR / POP_SOUND_FREQUENCY_HZ
    gain_ratio = POP_SOUND_FLOOR / POP_SOUND_GAIN
    t = np.arange(int(sample_rate * duration)) / sample_rate
    # phase is the integral of the swept frequency
    phase = 2 * math.pi * POP_SOUND_FREQUENCY_HZ * duration * (freq_ratio ** (t / duration) - 1) / math.log(freq_ratio)
    gain = POP_SOUND_GAIN * gain_ratio ** (t / duration)
    return gain * np.sin(phase)


def synthesize_pop_sound(path: str | Path, sample_rate: int = POP_SOUND_SAMPLE_RATE) -> Path:
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    samples = np.clip(pop_sound_samples(sample_rate), -1.0, 1.0)
    frames = (samples * 32767).astype("<i2").tobytes()
    with wave.open(str(out_path), "wb") as wav:
        wav.setnchannels(1)
        wav.setsampwidth(2)
        wav.setframerate(sample_rate)
        wav.writeframes(frames)
    return out_path


def preload_sound_effects(directory: Optional[Path] = None, volume: int = 90) -> None:
    audio_dir = Path(directory) if directory is not None else _sound_effects_dir
    pop_path = audio_dir / POP_SOUND_FILE
    if not pop_path.exists():
        try:
            synthesize_pop_sound(pop_path)
        except OSError as exc:
            print(f"Could not write {pop_path}: {exc}")
            return
    for path in sorted(audio_dir.iterdir()):
        if not path.is_file():
            continue
        if path.suffix.lower() not in {".mp3", ".wav", ".ogg", ".m4a"}:
            continue
        _get_or_create_player(path, volume)


def play_audio(path: str | Path, volume: int = 90) -> None:
    audio_path = _resolve_audio_path(path)
    player = _get_or_create_player(audio_path, volume)
    player.stop()
    player.setPosition(0)
    player.play()


def play_pop_sound() -> None:
    pop_path = _sound_effects_dir / POP_SOUND_FILE
    try:
        if not pop_path.exists():
            synthesize_pop_sound(pop_path)
        play_audio(pop_path)
    except Exception:
        print("Audio not supported")
