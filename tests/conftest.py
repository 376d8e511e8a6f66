"""Shared test inputs."""

from __future__ import annotations

DENSITY_SRCSET = "image-1x.png 1x, image-2x.png 2x, image-3x.png 3x, image-4x.png 4x"

WIDTH_SRCSET = """elva-fairy-320w.jpg 320w,
            elva-fairy-480w.jpg 480w,
            elva-fairy-800w.jpg 800w"""

HEIGHT_SRCSET = """elva-fairy-320h.jpg 320h,
            elva-fairy-480h.jpg 480h,
            elva-fairy-800h.jpg 800h"""

PICTURE_HTML = """<!doctype html>
<html>
<head><title>Gallery</title></head>
<body>
<picture>
  <source srcset="hero.webp 1x, hero@2x.webp 2x" type="image/webp">
  <img src="hero.jpg" srcset="hero-320.jpg 320w,
       hero-640.jpg 640w" alt="Hero">
</picture>
<img src="plain.png" alt="No srcset">
<img srcset="" alt="Empty">
<a href="/" srcset="ignored.png 1x">link</a>
</body>
</html>
"""
