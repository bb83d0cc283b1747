"""Reading of block state and block model JSON assets."""

import json
from dataclasses import dataclass, field
from typing import Optional

from blockworld.assets import iter_files, load_string

NAMESPACE = "minecraft:"
BLOCK_PREFIX = "minecraft:block/"
BLOCKSTATES_PATH = "/minecraft/blockstates"
MODELS_PATH = "/minecraft/models/block"


def _floats(values):
    return [float(v) for v in values]


def _with_namespace(name):
    return name if name.startswith(NAMESPACE) else NAMESPACE + name


def merge_patch(target, patch):
    """Apply a JSON merge patch to ``target`` and return the result.

    ``target`` is left unchanged; the result shares no dictionaries with it.
    """
    if not isinstance(patch, dict):
        return patch
    result = dict(target) if isinstance(target, dict) else {}
    for key, value in patch.items():
        if value is None:
            result.pop(key, None)
        else:
            result[key] = merge_patch(result.get(key), value)
    return result


@dataclass
class BlockDisplay:
    rotation: list = field(default_factory=list)
    translation: list = field(default_factory=list)
    scale: list = field(default_factory=list)

    @classmethod
    def from_json(cls, data):
        return cls(
            rotation=_floats(data.get("rotation", [])),
            translation=_floats(data.get("translation", [])),
            scale=_floats(data.get("scale", [])),
        )

    def to_json(self):
        out = {}
        if self.rotation:
            out["rotation"] = list(self.rotation)
        if self.translation:
            out["translation"] = list(self.translation)
        if self.scale:
            out["scale"] = list(self.scale)
        return out


@dataclass
class BlockFace:
    texture: str = ""
    cullface: str = ""
    uv: list = field(default_factory=list)
    rotation: Optional[float] = None
    tintindex: int = -1

    @classmethod
    def from_json(cls, data):
        return cls(
            texture=str(data.get("texture", "")),
            cullface=str(data.get("cullface", "")),
            uv=_floats(data.get("uv", [])),
            rotation=float(data["rotation"]) if "rotation" in data else None,
            tintindex=int(data.get("tintindex", -1)),
        )

    def to_json(self):
        out = {}
        if self.texture:
            out["texture"] = self.texture
        if self.cullface:
            out["cullface"] = self.cullface
        if self.uv:
            out["uv"] = list(self.uv)
        if self.rotation is not None:
            out["rotation"] = self.rotation
        if self.tintindex != -1:
            out["tintindex"] = self.tintindex
        return out


@dataclass
class BlockElementRotation:
    origin: list = field(default_factory=list)
    axis: str = ""
    angle: float = 0.0
    rescale: Optional[bool] = None

    @classmethod
    def from_json(cls, data):
        return cls(
            origin=_floats(data.get("origin", [])),
            axis=str(data.get("axis", "")),
            angle=float(data.get("angle", 0.0)),
            rescale=bool(data["rescale"]) if "rescale" in data else None,
        )

    def to_json(self):
        out = {}
        if self.origin:
            out["origin"] = list(self.origin)
        if self.axis:
            out["axis"] = self.axis
        out["angle"] = self.angle
        if self.rescale is not None:
            out["rescale"] = self.rescale
        return out


@dataclass
class BlockElement:
    from_: list = field(default_factory=list)
    to: list = field(default_factory=list)
    rotation: Optional[BlockElementRotation] = None
    shade: Optional[bool] = None
    faces: dict = field(default_factory=dict)
    comment: str = ""

    @classmethod
    def from_json(cls, data):
        rotation = data.get("rotation")
        return cls(
            from_=_floats(data.get("from", [])),
            to=_floats(data.get("to", [])),
            rotation=BlockElementRotation.from_json(rotation) if rotation is not None else None,
            shade=bool(data["shade"]) if "shade" in data else None,
            faces={k: BlockFace.from_json(v) for k, v in data.get("faces", {}).items()},
            comment=str(data.get("__comment", "")),
        )

    def to_json(self):
        out = {}
        if self.from_:
            out["from"] = list(self.from_)
        if self.to:
            out["to"] = list(self.to)
        if self.rotation is not None:
            out["rotation"] = self.rotation.to_json()
        if self.shade is not None:
            out["shade"] = self.shade
        if self.faces:
            out["faces"] = {k: self.faces[k].to_json() for k in sorted(self.faces)}
        if self.comment:
            out["__comment"] = self.comment
        return out


@dataclass
class BlockModel:
    name: str = ""
    parent: str = ""
    textures: dict = field(default_factory=dict)
    elements: list = field(default_factory=list)
    ambientocclusion: Optional[bool] = None
    gui_light: str = ""
    display: dict = field(default_factory=dict)

    @classmethod
    def from_json(cls, data):
        return cls(
            parent=str(data.get("parent", "")),
            textures={str(k): str(v) for k, v in data.get("textures", {}).items()},
            elements=[BlockElement.from_json(e) for e in data.get("elements", [])],
            ambientocclusion=(
                bool(data["ambientocclusion"]) if "ambientocclusion" in data else None
            ),
            gui_light=str(data.get("gui_light", "")),
            display={k: BlockDisplay.from_json(v) for k, v in data.get("display", {}).items()},
        )

    def to_json(self):
        out = {}
        if self.parent:
            out["parent"] = self.parent
        if self.elements:
            out["elements"] = [e.to_json() for e in self.elements]
        if self.textures:
            out["textures"] = {k: self.textures[k] for k in sorted(self.textures)}
        if self.ambientocclusion is not None:
            out["ambientocclusion"] = self.ambientocclusion
        if self.gui_light:
            out["gui_light"] = self.gui_light
        if self.display:
            out["display"] = {k: self.display[k].to_json() for k in sorted(self.display)}
        return out


@dataclass
class BlockVariant:
    model: str = ""
    x: Optional[int] = None
    y: Optional[int] = None
    uvlock: Optional[bool] = None
    weight: Optional[int] = None

    @classmethod
    def from_json(cls, data):
        return cls(
            model=str(data["model"]),
            x=int(data["x"]) if "x" in data else None,
            y=int(data["y"]) if "y" in data else None,
            uvlock=bool(data["uvlock"]) if "uvlock" in data else None,
            weight=int(data["weight"]) if "weight" in data else None,
        )

    def to_json(self):
        out = {"model": self.model}
        if self.x is not None:
            out["x"] = self.x
        if self.y is not None:
            out["y"] = self.y
        if self.uvlock is not None:
            out["uvlock"] = self.uvlock
        if self.weight is not None:
            out["weight"] = self.weight
        return out


def _variant_list(value):
    if isinstance(value, list):
        return [BlockVariant.from_json(v) for v in value]
    return [BlockVariant.from_json(value)]


@dataclass
class BlockMultipart:
    when: list = field(default_factory=list)
    apply: list = field(default_factory=list)

    @classmethod
    def from_json(cls, data):
        when = []
        if "when" in data:
            value = data["when"]
            if "OR" in value:
                when = [dict(d) for d in value["OR"]]
            else:
                when = [dict(value)]
        return cls(when=when, apply=_variant_list(data["apply"]) if "apply" in data else [])

    def to_json(self):
        out = {}
        if self.when:
            if len(self.when) == 1:
                out["when"] = dict(self.when[0])
            else:
                out["when"] = {"OR": [dict(d) for d in self.when]}
        if self.apply:
            if len(self.apply) == 1:
                out["apply"] = self.apply[0].to_json()
            else:
                out["apply"] = [v.to_json() for v in self.apply]
        return out


@dataclass
class BlockStates:
    name: str = ""
    variants: dict = field(default_factory=dict)
    multipart: list = field(default_factory=list)

    @classmethod
    def from_json(cls, data):
        variants = {key: _variant_list(value) for key, value in data.get("variants", {}).items()}
        multipart = [BlockMultipart.from_json(m) for m in data.get("multipart", [])]
        return cls(variants=variants, multipart=multipart)

    def to_json(self):
        out = {}
        if self.variants:
            out["variants"] = {
                key: (
                    self.variants[key][0].to_json()
                    if len(self.variants[key]) == 1
                    else [v.to_json() for v in self.variants[key]]
                )
                for key in sorted(self.variants)
            }
        if self.multipart:
            out["multipart"] = [m.to_json() for m in self.multipart]
        return out


@dataclass
class ImportedBlock:
    models: dict = field(default_factory=dict)
    states: BlockStates = field(default_factory=BlockStates)

    @classmethod
    def from_json(cls, data):
        states = BlockStates.from_json(data["states"])
        models = {k: BlockModel.from_json(v) for k, v in data["models"].items()}
        return cls(models=models, states=states)

    def to_json(self):
        return {
            "states": self.states.to_json(),
            "models": {k: self.models[k].to_json() for k in sorted(self.models)},
        }


def read_json(path, prefix):
    """Parse every ``.json`` file of an assets directory, keyed by ``prefix`` + stem."""
    documents = {}
    for filepath in iter_files(path, r".+\.json"):
        text = load_string(f"{path}/{filepath.name}")
        documents.setdefault(prefix + filepath.stem, json.loads(text))
    return documents


class MinecraftImporter:
    """Resolves block states and (inherited) block models from raw JSON documents."""

    def __init__(self, states=None, models=None):
        self._states = dict(states or {})
        self._models = dict(models or {})

    @property
    def states(self):
        return dict(self._states)

    @property
    def models(self):
        return dict(self._models)

    def load(self):
        """Read block states and block models from the assets directory."""
        self._states = read_json(BLOCKSTATES_PATH, BLOCK_PREFIX)
        self._models = read_json(MODELS_PATH, BLOCK_PREFIX)

    def get_block_states(self, name):
        return BlockStates.from_json(self._states.get(name, {}))

    def get_block_model(self, name):
        """Return the model ``name`` with its parents' documents merged over it."""
        merged = {}
        key = name
        visited = set()
        while key in self._models:
            if key in visited:
                raise ValueError(f"cyclic model parents at {key!r}")
            visited.add(key)
            document = self._models[key]
            merged = merge_patch(merged, document)
            if "parent" in document:
                key = _with_namespace(str(document["parent"]))
            else:
                break
        return BlockModel.from_json(merged)

    def get_block(self, name):
        """Return the block states of ``name`` with every model its variants use."""
        states = self.get_block_states(name)
        if not states.variants:
            return ImportedBlock()
        models = {}
        for key in sorted(states.variants):
            for variant in states.variants[key]:
                if variant.model not in models:
                    models[variant.model] = self.get_block_model(variant.model)
        return ImportedBlock(models=models, states=states)


def missing_models(importer):
    """Map each referenced model that resolves to no elements to its first referencing state."""
    referenced = {}
    states = importer.states
    for state_name in sorted(states):
        block_states = BlockStates.from_json(states[state_name])
        variants = [v for key in sorted(block_states.variants) for v in block_states.variants[key]]
        variants += [v for part in block_states.multipart for v in part.apply]
        for variant in variants:
            if variant.model:
                referenced.setdefault(_with_namespace(variant.model), state_name)
    return {
        model: referenced[model]
        for model in sorted(referenced)
        if not importer.get_block_model(model).elements
    }