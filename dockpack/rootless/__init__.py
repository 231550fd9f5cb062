"""User, namespace and permission handling for rootless operation."""