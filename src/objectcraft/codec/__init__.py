from objectcraft.codec.deserializer import deserialize, parse
from objectcraft.codec.serializer import serialize

__all__ = ["deserialize", "parse", "serialize"]
