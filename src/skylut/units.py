"""Physical units.

Every quantity is a plain float. A value multiplied by one of these constants
is expressed in meters (lengths), nanometers (wavelengths) or radians
(angles), with no runtime conversion.
"""

PI = 3.14159265358979323846

m = 1.0
nm = 1.0
rad = 1.0

km = 1000.0 * m
pi = PI * rad
deg = pi / 180.0
