## rotation matrices and Euler-angle rotation for cubegeom

## Copyright (c) 2026 cubegeom contributors
## Portions Copyright (c) 2020 Richard W. DeVaul
## Portions Copyright (c) 2020 yapCAD contributors
## All rights reserved

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

from math import *
import cubegeom.geom as geom

## A matrix is represented as a tuple of three row tuples. Matrices
## are immutable: every operation returns a new Matrix.  Vectors are
## column vectors, so M.mul(v) computes Mv.

## Orientation of a cube is kept as three accumulated angles (radians)
## about the x, y and z axes.  The combined rotation applies the
## elementary rotations in the order Z, then Y, then X, which is to
## say R = Rx * Ry * Rz.  rotate_euler() applies that rotation
## directly, one plane at a time; euler_rotation() builds the
## equivalent matrix, and euler_angles() recovers the three angles
## from any rotation matrix, which is how arbitrary-axis rotations are
## folded back into the angle representation.


class Matrix:
    """3x3 matrix class for rotating 3D vectors"""

    def __init__(self,a=False,trans=False):
        m = [[1.0,0.0,0.0],
             [0.0,1.0,0.0],
             [0.0,0.0,1.0]]

        if isinstance(a,Matrix):
            m = [list(a.getrow(i)) for i in range(3)]

        elif isinstance(a,(tuple,list)):
            if len(a) == 3:
                if not all(isinstance(r,(tuple,list)) and len(r) == 3 for r in a):
                    raise ValueError('bad rows in matrix initialization: {}'.format(a))
                for i in range(3):
                    for j in range(3):
                        x = a[i][j]
                        if geom.isgoodnum(x):
                            m[i][j]=float(x)
                        else:
                            raise ValueError('bad element in matrix initialization: {}'.format(x))
            elif len(a)==9:
                for i in range(3):
                    for j in range(3):
                        x = a[i*3+j]
                        if geom.isgoodnum(x):
                            m[i][j]=float(x)
                        else:
                            raise ValueError('bad element in matrix initialization: {}'.format(x))
            else:
                raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))
        elif a is not False:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))

        if trans:
            m = [[m[j][i] for j in range(3)] for i in range(3)]
        self.m = tuple(tuple(r) for r in m)

    def __repr__(self):
        return "Matrix({},{},{})".format(self.m[0],self.m[1],self.m[2])

    def __eq__(self,other):
        return isinstance(other,Matrix) and self.m == other.m

    def __hash__(self):
        return hash(self.m)

    #return value indexed by i,j
    def get(self,i,j):
        if i < 0 or i > 2 or j < 0 or j > 2:
            raise ValueError('bad index passed to get: {},{}'.format(i,j))
        return self.m[i][j]

    def getrow(self,i):
        if i < 0 or i > 2:
            raise ValueError('bad row passed to getrow: {}'.format(i))
        return self.m[i]

    def getcol(self,j):
        if j < 0 or j > 2:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        return (self.m[0][j],self.m[1][j],self.m[2][j])

    def transpose(self):
        return Matrix(self,True)

    # matrix multiply.  If x is a matrix, compute MX.  If x is a
    # vector, compute Mx. If x is a scalar, compute xM.

    def mul(self,x):
        if isinstance(x,Matrix):
            return Matrix([[geom.dot(self.getrow(i),x.getcol(j))
                            for j in range(3)] for i in range(3)])
        elif geom.isgoodnum(x):
            return Matrix([geom.scale3(self.getrow(i),x) for i in range(3)])
        elif isinstance(x,(tuple,list)) or hasattr(x,'__getitem__'):
            return (geom.dot(self.m[0],x),
                    geom.dot(self.m[1],x),
                    geom.dot(self.m[2],x))

        raise ValueError('bad thing passed to mul(): {}'.format(x))

    def isidentity(self,tol=geom.epsilon):
        return all(abs(self.m[i][j] - (1.0 if i == j else 0.0)) < tol
                   for i in range(3) for j in range(3))


Identity = Matrix()

## elementary rotations, angles in radians

def RotationX(angle,inverse=False):
    if inverse:
        angle = -angle
    c = cos(angle)
    s = sin(angle)
    return Matrix([[1,0,0],
                   [0,c,-s],
                   [0,s,c]])

def RotationY(angle,inverse=False):
    if inverse:
        angle = -angle
    c = cos(angle)
    s = sin(angle)
    return Matrix([[c,0,s],
                   [0,1,0],
                   [-s,0,c]])

def RotationZ(angle,inverse=False):
    if inverse:
        angle = -angle
    c = cos(angle)
    s = sin(angle)
    return Matrix([[c,-s,0],
                   [s,c,0],
                   [0,0,1]])

# return the generalized 3x3 arbitrary axis rotation matrix, angle
# in radians, right-handed about the axis
def Rotation(axis,angle,inverse=False):
    m = geom.mag(axis)
    u = axis
    if m < geom.epsilon:
        raise ValueError('zero-length rotation axis not allowed')
    if not geom.close(m,1.0):
        u = geom.scale3(axis,1.0/m)

    if inverse:
        angle = -angle

    ux = u[0]
    uy = u[1]
    uz = u[2]

    cang = cos(angle)
    cmin = 1.0-cang
    sang = sin(angle)

    # see http://www.opengl-tutorial.org/assets/faq_quaternions/index.html#Q38
    R = [[cang + ux*ux*cmin, ux*uy*cmin-uz*sang, ux*uz*cmin+uy*sang],
         [uy*ux*cmin+uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang],
         [uz*ux*cmin-uy*sang, uz*uy*cmin+ux*sang, cang+uz*uz*cmin]]

    return Matrix(R)

## Euler-angle rotation
## --------------------

def isunrotated(rx,ry,rz):
    """ true if all three angles are within epsilon of zero"""
    return abs(rx) < geom.epsilon and abs(ry) < geom.epsilon and \
        abs(rz) < geom.epsilon

def rotate_euler(v,rx,ry,rz,inverse=False):
    """Rotate the 3 vector ``v`` by the accumulated angles ``rx``,
    ``ry``, ``rz``.

    The forward rotation applies Z, then Y, then X.  The inverse
    applies X, Y, Z by the negated angles, mapping a world-frame
    offset back into the rotated frame.  Planes whose angle is below
    epsilon are skipped.
    """
    x, y, z = float(v[0]), float(v[1]), float(v[2])

    def _z(x,y,z,a):
        c = cos(a)
        s = sin(a)
        return x*c - y*s, x*s + y*c, z

    def _y(x,y,z,a):
        c = cos(a)
        s = sin(a)
        return x*c + z*s, y, -x*s + z*c

    def _x(x,y,z,a):
        c = cos(a)
        s = sin(a)
        return x, y*c - z*s, y*s + z*c

    if inverse:
        steps = ((_x,-rx,rx),(_y,-ry,ry),(_z,-rz,rz))
    else:
        steps = ((_z,rz,rz),(_y,ry,ry),(_x,rx,rx))

    for fn, a, orig in steps:
        if abs(orig) > geom.epsilon:
            x, y, z = fn(x,y,z,a)
    return (x,y,z)

def euler_rotation(rx,ry,rz):
    """return the matrix Rx * Ry * Rz equivalent to rotate_euler()"""
    if isunrotated(rx,ry,rz):
        return Identity
    return RotationX(rx).mul(RotationY(ry)).mul(RotationZ(rz))

def euler_angles(m):
    """Decompose the rotation matrix ``m`` into angles ``(rx, ry, rz)``
    such that ``euler_rotation(rx, ry, rz)`` reproduces ``m``.

    With ``R = Rx(a) Ry(b) Rz(c)``, ``R[0][2] = sin(b)`` and the length
    of ``(R[0][0], R[0][1])`` is ``cos(b)``.  When ``cos(b)`` vanishes
    (gimbal lock) only ``a + c`` or ``a - c`` is determined, and ``c`` is
    fixed at zero.
    """
    sb = m.get(0,2)
    cb = hypot(m.get(0,0),m.get(0,1))
    if cb < geom.epsilon:
        ry = copysign(pi/2.0,sb)
        rz = 0.0
        rx = atan2(m.get(2,1),m.get(1,1))
    else:
        ry = atan2(sb,cb)
        rx = atan2(-m.get(1,2),m.get(2,2))
        rz = atan2(-m.get(0,1),m.get(0,0))
    return (rx,ry,rz)
