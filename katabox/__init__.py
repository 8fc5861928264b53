"""Small coding katas: tennis scoring, an ALU, Wheel of Fortune, string sums, video rentals and warm-up exercises."""

__version__ = "0.1.0"