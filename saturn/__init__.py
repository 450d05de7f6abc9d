"""Saturn: an arcade game of dodging sliding stones and pushing a ball, built with pygame."""

__version__ = "0.1.0"