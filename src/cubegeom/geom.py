## foundational scalar and vector operations for cubegeom
## Copyright (c) 2026 cubegeom contributors
## Portions Copyright (c) 2020 Richard W. DeVaul
## Portions Copyright (c) 2020 yapCAD contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""foundational scalar and vector operations for **cubegeom**

====================
OVERVIEW
====================

The cubegeom.geom module provides the constants, scalar predicates and
three-vector operations that the ``Coordinate``, ``Segment`` and
``Cube`` value types are built on.

constants
=========

cubegeom.geom provides the "constant" ``epsilon``.
``epsilon`` is used uniformly for treating near-zero cross products as
parallel, near-zero rotation angles as unrotated, and for inclusive
boundary tests.  Redefine it at your peril.

vectors
=======

Unlike points, which are ``Coordinate`` instances, free vectors
(directions, differences, normals) are plain 3-tuples of floats,
``(x, y, z)``.  Every function here accepts anything indexable with
at least three numeric components, so a ``Coordinate`` may be passed
wherever a vector is expected, and always returns a tuple.

"""

from math import *

## constants
epsilon = 1e-10

## operations on scalars
## -----------------------

## utility function to determine if argument is a "real" python
## number, since booleans are considered ints (True=1 and False=0 for
## integer arithmetic) but 1 and 0 are not considered boolean

def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n,bool)) and isinstance(n,(int,float))

def isfinitenum(n):
    """ a good number that is neither NaN nor infinite"""
    return isgoodnum(n) and isfinite(n)

## utilty function to determine if scalars a and b are the same to
## within epsilon
def close(a,b):
    """ are two scalars the same within epsilon
    """
    return abs(a-b) < epsilon

## R^3 -> R^3 functions
## ------------------------------------------------
def vect(x=0.0,y=0.0,z=0.0):
    """ make a free 3 vector"""
    return (float(x),float(y),float(z))

def add(a,b):
    """ 3 vector, `a + b`"""
    return (a[0]+b[0],a[1]+b[1],a[2]+b[2])

def sub(a,b):
    """ 3 vector, `a - b`"""
    return (a[0]-b[0],a[1]-b[1],a[2]-b[2])

def scale3(a,c):
    """ 3 vector, vector ''a'' times scalar ``c``, `a * c`"""
    return (a[0]*c,a[1]*c,a[2]*c)

def cross(a,b):
    """Compute the cross product of 3 vectors a x b"""
    return ( a[1]*b[2] - a[2]*b[1],
             a[2]*b[0] - a[0]*b[2],
             a[0]*b[1] - a[1]*b[0] )

## R^3 -> R functions
## ----------------------------------------
def dot(a,b):
    """ 3 vector ``a`` dot ``b`` """
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]

def mag(a):
    """ compute the magnitude of 3 vector ``a``"""
    return sqrt(a[0]*a[0]+a[1]*a[1]+a[2]*a[2])

def dist(a,b):  # compute distance between two points a & b
    """ compute the euclidean distance between two 3 vector points ``a`` and ``b``"""
    return mag(sub(a,b))

## determine if two vectors are the same, to within epsilon
def vclose(a,b,tol=epsilon):
    return mag(sub(a,b)) < tol

def unit(a):
    """ return ``a`` scaled to unit length; a zero vector is a ValueError"""
    m = mag(a)
    if m < epsilon:
        raise ValueError('cannot normalize zero-length vector: {}'.format(a))
    return scale3(a,1.0/m)

def vstr(a,places=2):
    """ format a 3 vector as ``(x, y, z)`` with fixed precision"""
    return "({:.{p}f}, {:.{p}f}, {:.{p}f})".format(a[0],a[1],a[2],p=places)
