"""ProjectEnv API package - front ends over the environment resolver."""
