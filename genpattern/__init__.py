"""Non-overlapping placement of image silhouettes on a tileable canvas."""

__version__ = "0.1.0"
__all__ = ["api", "canvas", "generator", "geometry", "images", "schedules"]