"""Sound management system."""

import array
import logging
import math

import pygame

from . import config

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050

# event name -> (frequency Hz, duration s)
EFFECTS = {
    "tower_place": (400, 0.1),
    "upgrade": (700, 0.12),
    "shoot": (600, 0.05),
    "enemy_death": (200, 0.12),
    "leak": (150, 0.2),
    "wave_start": (800, 0.3),
    "wave_complete": (1000, 0.25),
    "game_over": (100, 0.5),
}


def generate_tone(frequency, duration, sample_rate=SAMPLE_RATE):
    """Build a stereo 16-bit sine wave.

    Args:
        frequency: Tone frequency in Hz
        duration: Length in seconds
        sample_rate: Samples per second

    Returns:
        array.array: Interleaved stereo samples
    """
    frames = int(duration * sample_rate)
    samples = array.array("h")
    for i in range(frames):
        value = int(32767 * 0.3 * math.sin(2.0 * math.pi * frequency * i / sample_rate))
        samples.append(value)
        samples.append(value)
    return samples


class SoundManager:
    """Plays a short beep for each simulation event."""

    def __init__(self, enabled=config.ENABLE_SOUND, volume=config.SOUND_VOLUME):
        """Initialize the sound manager.

        Args:
            enabled: Whether to touch the audio device at all
            volume: Playback volume (0.0-1.0)
        """
        self.enabled = enabled
        self.volume = volume
        self.sounds = {}

        if self.enabled:
            try:
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2)
                self._load_sounds()
            except pygame.error as e:
                logger.warning("Sound initialization failed, continuing muted: %s", e)
                self.enabled = False

    def _load_sounds(self):
        for name, (frequency, duration) in EFFECTS.items():
            sound = pygame.mixer.Sound(buffer=generate_tone(frequency, duration))
            sound.set_volume(self.volume)
            self.sounds[name] = sound

    def play(self, sound_name):
        """Play a sound effect; unknown names are ignored."""
        if not self.enabled or sound_name not in self.sounds:
            return
        self.sounds[sound_name].play()

    def play_events(self, events):
        """Play one effect per distinct event name."""
        for name in dict.fromkeys(events):
            self.play(name)

    def stop_all(self):
        """Stop all playing sounds."""
        if self.enabled:
            pygame.mixer.stop()
