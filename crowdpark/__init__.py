"""
crowdpark: seeded crowd-density and parking simulation with scenario transforms.
"""
__version__ = "0.1.0"
