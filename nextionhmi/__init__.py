"""Pages, sliders, text, scrolling text and the real-time clock of a Nextion HMI display, driven over a command link."""

__version__ = "0.1.0"