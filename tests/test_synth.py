import math

import pytest

from pendulumviz.synth import HarmonicOscillator, harmonic_mix, map_vel_to_freq


def test_harmonic_mix_zero_phase_is_silent():
    for vel in (0.0, 3.0, 5.0, 20.0):
        assert harmonic_mix(0.0, vel) == pytest.approx(0.0, abs=1e-12)


def test_harmonic_mix_low_velocity_quarter_phase():
    assert harmonic_mix(math.pi / 2.0, 0.0) == pytest.approx(0.5)


@pytest.mark.parametrize("phase", [0.3, 1.1, 2.5, 4.0, 5.9])
def test_harmonic_mix_saturates_below_and_above_thresholds(phase):
    assert harmonic_mix(phase, 0.0) == pytest.approx(harmonic_mix(phase, 2.0))
    assert harmonic_mix(phase, 8.0) == pytest.approx(harmonic_mix(phase, 100.0))


@pytest.mark.parametrize("vel", [0.0, 2.0, 4.5, 8.0, 50.0])
def test_harmonic_mix_is_bounded(vel):
    for i in range(200):
        phase = i * math.tau / 200
        assert -1.0 - 1e-9 <= harmonic_mix(phase, vel) <= 1.0 + 1e-9


def test_harmonic_mix_velocity_changes_timbre():
    assert harmonic_mix(1.0, 0.0) != pytest.approx(harmonic_mix(1.0, 8.0))


def test_map_vel_to_freq_endpoints():
    assert map_vel_to_freq(10.0, 10.0, 100.0, 1000.0) == pytest.approx(1000.0)
    assert map_vel_to_freq(-10.0, 10.0, 100.0, 1000.0) == pytest.approx(100.0)


def test_map_vel_to_freq_midpoint():
    assert map_vel_to_freq(0.0, 10.0, 100.0, 1000.0) == pytest.approx(550.0)


def test_map_vel_to_freq_clamps_out_of_range():
    assert map_vel_to_freq(1e6, 10.0, 100.0, 1000.0) == pytest.approx(1000.0)
    assert map_vel_to_freq(-1e6, 10.0, 100.0, 1000.0) == pytest.approx(100.0)


def test_map_vel_to_freq_nan_maps_to_low():
    assert map_vel_to_freq(float("nan"), 10.0, 100.0, 1000.0) == pytest.approx(100.0)


def test_map_vel_to_freq_is_monotonic():
    values = [map_vel_to_freq(v / 4.0, 10.0, 100.0, 1000.0) for v in range(-60, 61)]
    assert values == sorted(values)


def test_render_length_matches_frames_and_channels():
    osc = HarmonicOscillator()
    assert len(osc.render(64, 2)) == 128
    assert len(osc.render(10, 1)) == 10


def test_render_rejects_no_channels():
    with pytest.raises(ValueError):
        HarmonicOscillator().render(4, 0)


def test_render_muted_is_silent_and_keeps_phase():
    osc = HarmonicOscillator(mute=True, phase_left=1.0, phase_right=2.0)
    samples = osc.render(32, 2)
    assert samples == [0.0] * 64
    assert osc.phase_left == 1.0
    assert osc.phase_right == 2.0


def test_render_zero_frequency_stays_silent():
    osc = HarmonicOscillator(freq_left=0.0, freq_right=0.0)
    assert all(s == pytest.approx(0.0, abs=1e-12) for s in osc.render(16, 2))


def test_render_equal_voices_give_equal_channels():
    osc = HarmonicOscillator(freq_left=300.0, freq_right=300.0, vel_left=5.0, vel_right=-5.0)
    samples = osc.render(50, 2)
    assert samples[0::2] == pytest.approx(samples[1::2])


def test_render_extra_channels_are_silent():
    osc = HarmonicOscillator(freq_left=440.0, freq_right=660.0)
    samples = osc.render(20, 4)
    assert samples[2::4] == [0.0] * 20
    assert samples[3::4] == [0.0] * 20


def test_render_mono_carries_left_voice():
    stereo = HarmonicOscillator(freq_left=440.0, freq_right=660.0, vel_left=3.0)
    mono = HarmonicOscillator(freq_left=440.0, freq_right=660.0, vel_left=3.0)
    assert mono.render(40, 1) == pytest.approx(stereo.render(40, 2)[0::2])


def test_render_phases_wrap_into_range():
    osc = HarmonicOscillator(freq_left=900.0, freq_right=1000.0)
    for _ in range(20):
        osc.render(100, 2, 8000.0)
        assert 0.0 <= osc.phase_left <= math.tau
        assert 0.0 <= osc.phase_right <= math.tau


def test_render_is_continuous_across_calls():
    whole = HarmonicOscillator(freq_left=250.0, freq_right=375.0, vel_left=6.0)
    split = HarmonicOscillator(freq_left=250.0, freq_right=375.0, vel_left=6.0)
    expected = whole.render(60, 2)
    got = split.render(25, 2) + split.render(35, 2)
    assert got == pytest.approx(expected)


def test_render_samples_are_bounded():
    osc = HarmonicOscillator(freq_left=123.0, freq_right=987.0, vel_left=4.0, vel_right=9.0)
    assert all(-1.0 - 1e-9 <= s <= 1.0 + 1e-9 for s in osc.render(500, 2))