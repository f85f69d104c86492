"""Formula One team season simulator: engineering, testing, logistics and race weekends."""

__version__ = "0.1.0"