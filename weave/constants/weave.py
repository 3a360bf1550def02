import math

# Zigzag edge split. Each new point sits SPLIT_RATIO of the edge length away
# from its endpoint, rotated SPLIT_ANGLE radians off the edge direction.
SPLIT_RATIO = 1.0 / math.sqrt(7.0)
SPLIT_ANGLE = 0.33347

# Vertices touching fewer polygons than this are left alone by smoothing.
SMOOTH_MIN_DEGREE = 3

# side count of each planar polygon seed
POLYGON_SIDES = {'Square': 4, 'Pentagon': 5, 'Hexagon': 6}
