"""
Alarm tones - synthesized with numpy, played through the pygame mixer.
"""

import logging

import numpy as np
import pygame

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100

# name -> (frequency Hz, seconds)
TONES = {
    "Beep": (440, 0.15),
    "Alert": (1200, 0.2),
    "Chime": (880, 0.25),
    "Bell": (1760, 0.2),
    "Alarm": (600, 0.35),
}
SOUND_NAMES = list(TONES) + ["Custom"]


def tone_samples(freq, duration, sample_rate=SAMPLE_RATE, channels=2):
    """Sine wave with 10ms fade in/out as int16 frames"""
    n = int(duration * sample_rate)
    t = np.linspace(0, duration, n, False)
    wave = np.sin(freq * t * 2 * np.pi)

    fade = min(int(sample_rate * 0.01), n // 2)
    if fade:
        wave[:fade] *= np.linspace(0, 1, fade)
        wave[-fade:] *= np.linspace(1, 0, fade)

    audio = (wave * 32767).astype(np.int16)
    if channels == 1:
        return audio
    return np.repeat(audio.reshape(n, 1), channels, axis=1)


class SoundManager:
    """Plays the alarm; never lets an audio problem reach the caller"""
    def __init__(self, enabled=True, custom_sound=None):
        self.sounds = {}
        self.custom_sound = custom_sound
        self.current_playing = None
        self.available = False

        if enabled:
            self._init_mixer()

    def _init_mixer(self):
        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
        except pygame.error as e:
            logger.warning("Sound disabled, mixer unavailable: %s", e)
            return
        self.available = True
        self._generate_sounds()

    def _generate_sounds(self):
        _, _, channels = pygame.mixer.get_init()
        for name, (freq, duration) in TONES.items():
            try:
                samples = tone_samples(freq, duration, channels=channels)
                self.sounds[name] = pygame.sndarray.make_sound(samples)
            except (pygame.error, ValueError) as e:
                logger.warning("Sound generation error for %s: %s", name, e)

    def play(self, sound_name):
        if not self.available:
            return False
        try:
            if sound_name == "Custom" and self.custom_sound:
                pygame.mixer.music.load(self.custom_sound)
                pygame.mixer.music.set_volume(1.0)
                pygame.mixer.music.play()
            elif self.sounds.get(sound_name) is not None:
                self.sounds[sound_name].play()
                self.current_playing = self.sounds[sound_name]
            else:
                logger.warning("Unknown sound %r", sound_name)
                return False
        except Exception as e:
            logger.warning("Play error: %s", e)
            return False
        return True

    def stop(self):
        if not self.available:
            return
        try:
            pygame.mixer.music.stop()
            if self.current_playing:
                self.current_playing.stop()
                self.current_playing = None
            pygame.mixer.stop()
        except Exception as e:
            logger.warning("Stop error: %s", e)
