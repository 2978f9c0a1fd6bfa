from collections.abc import Iterable

from huemon.bridge.data import Light


def select_lights(lights: Iterable[Light], model_ids: Iterable[str]) -> tuple[int, ...]:
    """Return the ids of the lights whose model id is one of ``model_ids``.

    Matching is exact and case-sensitive and the input order is kept. Empty
    entries (what an empty ``HuePlayID`` value splits into) never match.
    """
    wanted = {model_id for model_id in model_ids if model_id}
    if not wanted:
        return ()
    return tuple(light.light_id for light in lights if light.model_id in wanted)
