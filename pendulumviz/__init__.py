"""Double pendulum simulation, velocity visualisation, sonification and procedural colour images."""

__version__ = "0.1.0"

__all__ = ["colorgen", "pendulum", "visualizer", "synth", "simulation", "explorer"]