"""
lbconfig — generate UDP load-balancer configuration for team log ports.
"""

__version__ = "0.1.0"
