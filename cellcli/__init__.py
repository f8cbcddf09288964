"""Line-oriented command interpreter: name matching, argument parsing and dispatch."""

__version__ = "2.0.2"