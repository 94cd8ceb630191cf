from __future__ import annotations

import numpy as np

from pixel_shooter.audio import NullAudio, synthesize_explosion


def test_explosion_has_expected_length_and_dtype() -> None:
    samples = synthesize_explosion(44100, 0.3, rng=np.random.default_rng(0))
    assert samples.dtype == np.int16
    assert samples.shape == (13230,)


def test_explosion_fades_out() -> None:
    samples = synthesize_explosion(rng=np.random.default_rng(1)).astype(np.float64)
    quarter = len(samples) // 4

    def rms(chunk: np.ndarray) -> float:
        return float(np.sqrt(np.mean(chunk ** 2)))

    assert rms(samples[:quarter]) > 5 * rms(samples[-quarter:])


def test_explosion_peak_respects_start_gain() -> None:
    samples = synthesize_explosion(rng=np.random.default_rng(2))
    assert np.abs(samples.astype(np.int32)).max() <= int(0.5 * 32767) + 1
    assert np.abs(samples).max() > 0


def test_same_seed_same_waveform() -> None:
    a = synthesize_explosion(rng=np.random.default_rng(3))
    b = synthesize_explosion(rng=np.random.default_rng(3))
    np.testing.assert_array_equal(a, b)


def test_null_audio_is_silent_and_safe() -> None:
    audio = NullAudio()
    audio.play_explosion()
    audio.cleanup()
