from huemon.keyboard.numlock_controller import NumlockController

__all__ = ["NumlockController"]
