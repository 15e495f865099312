"""Example: store colors in a pydantic model as hex strings."""

from pydantic import BaseModel

from nicecolors import Color, HexColor


class Fruit(BaseModel):
    name: str
    color: HexColor


def main():
    """Dump a model to JSON, read it back, and blend the result."""

    apple = Fruit(name="apple", color=Color(255, 0, 0))

    json_data = apple.model_dump_json()
    print(json_data)

    # Any supported format is accepted on the way in
    plum = Fruit.model_validate_json('{"name": "plum", "color": "rgb(142, 69, 133)"}')
    print(repr(plum))

    mixed = apple.color.blend(plum.color, 0.5)
    print(f"Halfway from {apple.name} to {plum.name}: {mixed.to_hex(prefix=True)} / {mixed.to_rgb()}")


if __name__ == "__main__":
    main()
