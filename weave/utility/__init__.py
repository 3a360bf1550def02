from .geometry import distance, angle, polar, barycenter
