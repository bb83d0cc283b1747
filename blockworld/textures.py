"""Images, texture rectangles and a slot-based texture atlas packer."""

import warnings
from dataclasses import dataclass, field
from pathlib import Path

import numpy as np
from PIL import Image as PILImage

from blockworld.assets import iter_files

TEXTURE_ATLAS_DEFAULT_SIZE = 1024
TEXTURE_ATLAS_MIN_SIZE = 16
CHANNELS = 4  # r, g, b, a


def is_power_of_2(value):
    """Return True when ``value`` is a non-zero power of two."""
    return value != 0 and (value & (value - 1)) == 0


def _source_channels(img):
    if img.mode == "P":
        return 4 if "transparency" in img.info else 3
    return len(img.getbands())


class Image:
    """An image file decoded to RGBA pixels."""

    def __init__(self, path):
        self.path = Path(path)
        with PILImage.open(self.path) as img:
            self.channels = _source_channels(img)
            self.pixels = np.array(img.convert("RGBA"), dtype=np.uint8)

    @property
    def height(self):
        return int(self.pixels.shape[0])

    @property
    def width(self):
        return int(self.pixels.shape[1])

    @property
    def size(self):
        """Number of bytes of the RGBA pixel data."""
        return self.width * self.height * CHANNELS


@dataclass
class TextureRect:
    """A named region of the atlas and the image file that fills it."""

    id: int = 0
    name: str = ""
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    path: Path = field(default_factory=Path)
    uv: tuple = (0.0, 0.0, 0.0, 0.0)


def _slots(length, min_size):
    return length // min_size + min(1, length % min_size)


class TextureAtlas:
    """Packs texture rectangles into one square-slotted image."""

    def __init__(self, size=(TEXTURE_ATLAS_DEFAULT_SIZE, TEXTURE_ATLAS_DEFAULT_SIZE),
                 min_size=TEXTURE_ATLAS_MIN_SIZE):
        width, height = (int(c) for c in size)
        if not is_power_of_2(width) or not is_power_of_2(height):
            warnings.warn("atlas size is not a power of 2", stacklevel=2)
        self._width = width
        self._height = height
        self._min_size = int(min_size)
        self._regions = []

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def min_size(self):
        return self._min_size

    @property
    def regions(self):
        return tuple(self._regions)

    def add(self, region):
        """Register ``region``, give it the next id and return that id."""
        region.id = len(self._regions)
        self._regions.append(region)
        return region.id

    def _check_position(self, rect, used, pos_x, pos_y):
        out_x_slots = self._width // self._min_size
        out_y_slots = self._height // self._min_size
        x_slots = _slots(rect.width, self._min_size)
        y_slots = _slots(rect.height, self._min_size)
        if pos_x + x_slots > out_x_slots or pos_y + y_slots > out_y_slots:
            return False
        return all(
            used[(pos_y + y) * out_x_slots + pos_x + x] == 0
            for y in range(y_slots)
            for x in range(x_slots)
        )

    def _mark_position(self, rect, used, pos_x, pos_y):
        out_x_slots = self._width // self._min_size
        for y in range(_slots(rect.height, self._min_size)):
            for x in range(_slots(rect.width, self._min_size)):
                used[(pos_y + y) * out_x_slots + pos_x + x] = rect.id

    def _find_position(self, rect, used):
        y_slots = _slots(self._height, self._min_size)
        x_slots = _slots(self._width, self._min_size)
        for y in range(y_slots):
            for x in range(x_slots):
                if self._check_position(rect, used, x, y):
                    return x, y
        return None

    def pack(self):
        """Place every region, largest first; return the slot grid of region ids."""
        self._regions.sort(key=lambda r: (-r.height, -r.width, str(r.path)))
        used = [0] * ((self._width * self._height) // self._min_size)
        for rect in self._regions:
            pos = self._find_position(rect, used)
            if pos is None:
                print(f"Could not find room for {rect.path.name}")
                continue
            rect.x = pos[0] * self._min_size
            rect.y = pos[1] * self._min_size
            rect.uv = (
                rect.x / self._width,
                rect.y / self._height,
                (rect.x + rect.width) / self._width,
                (rect.y + rect.height) / self._height,
            )
            self._mark_position(rect, used, *pos)
        return used

    def _copy_pixels(self, rect, flat):
        source = Image(rect.path).pixels.reshape(-1, CHANNELS)
        for y in range(rect.height):
            offset = (rect.y + y) * self._width + rect.x
            if offset >= len(flat):
                print("out of range")
                continue
            row = source[y * rect.width:(y + 1) * rect.width]
            end = min(offset + len(row), len(flat))
            flat[offset:end] = row[:end - offset]

    def generate_pixels(self):
        """Pack the regions and return the atlas as a (height, width, 4) uint8 array."""
        self.pack()
        pixels = np.zeros((self._height, self._width, CHANNELS), dtype=np.uint8)
        flat = pixels.reshape(-1, CHANNELS)
        for rect in self._regions:
            self._copy_pixels(rect, flat)
        return pixels

    def save(self, filename):
        """Write the generated atlas to ``filename`` as a PNG."""
        PILImage.fromarray(self.generate_pixels()).save(filename, format="PNG")

    def get_rect_by_name(self, name):
        """Return the region called ``name``, or None."""
        return next((r for r in self._regions if r.name == name), None)

    def load_from_directory(self, prefix, path):
        """Add every PNG of an assets directory, named ``prefix`` + file stem."""
        for filepath in iter_files(path, r".+\.png"):
            image = Image(filepath)
            self.add(
                TextureRect(
                    name=prefix + image.path.stem,
                    path=image.path,
                    width=image.width,
                    height=image.height,
                )
            )
        self.generate_pixels()