from huemon.lights.selector import select_lights
from huemon.lights.switch import LightSwitch

__all__ = ["LightSwitch", "select_lights"]
