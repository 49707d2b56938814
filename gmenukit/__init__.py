"""Building blocks for a handheld console launcher menu: utilities, translations, surfaces, settings, dialogs, timers and platform detection."""

__version__ = "0.1.0"