"""framecast: frame-driven timeline evaluation for video compositions.

Every composition is a pure function of an integer frame index. The
timeline primitives (interpolation, springs, segment plans, crossfades)
live in :mod:`framecast.timeline`; the compositions themselves live in
:mod:`framecast.scenes` and are catalogued by :mod:`framecast.registry`.
"""

__version__ = "0.1.0"
