## bounding-volume and wireframe example for cubegeom
print("collision_demo.py -- cubegeom cube and segment queries")

import logging
import math

from cubegeom import Coordinate, Cube, Segment
from cubegeom.arrays import edge_array
from cubegeom.logging_config import setup_logging

setup_logging(logging.INFO)

## a crate, rotated a quarter of the way around z, and a probe cube
## drifting towards it along x
crate = Cube(Coordinate(0,0,0),2.0).rotate_z(math.pi/4)
probe = Cube(Coordinate(-4,0,0),0.5)

for step in range(6):
    hit = crate.intersects(probe)
    inside = crate.contains_point(probe.center)
    print("step {}: probe at {}  box overlap: {}  center inside: {}".format(
        step,probe.center,hit,inside))
    probe = probe.translate(0.6,0,0)

## wireframe export, one row per edge
print("\ncrate edges:")
for start, end in edge_array(crate):
    print("  {} -> {}".format(start.round(3),end.round(3)))

## line distance versus segment distance
a = Segment(Coordinate(0,0,0),Coordinate(1,0,0))
b = Segment(Coordinate(5,5,2),Coordinate(5,6,2))
print("\nline distance:    {:.3f}".format(a.shortest_distance_to(b)))
print("segment distance: {:.3f}".format(a.segment_distance_to(b)))
