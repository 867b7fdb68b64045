"""CRDT engine adapter backed by the automerge package."""

import logging
from typing import Any, Dict, List, Optional, Set, Tuple

from automerge.core import Document, ROOT, ObjType, ScalarType

from ..types import CrdtEngineInterface, DecodeError, EncodeError, JsonValue


class AutomergeEngine(CrdtEngineInterface):
    """
    Engine implementation over ``automerge.core``.

    Documents are rooted at a map, so ``create`` only accepts dicts at the
    top level. Strings are stored as plain string scalars rather than
    collaborative text objects; text objects written by other Automerge
    clients are still read back as strings.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the engine adapter.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def parse_actor(actor: str) -> bytes:
        """
        Convert a hex actor string into actor id bytes.

        Raises:
            ValueError: If the actor is not a hex string
        """
        try:
            return bytes.fromhex(actor)
        except ValueError as e:
            raise ValueError(f"Actor id must be a hex string: {e}") from e

    def create(self, value: Any, actor: Optional[str] = None) -> Document:
        if not isinstance(value, dict):
            raise EncodeError(
                f"Document root must be an object, got {type(value).__name__}",
                context={"root_type": type(value).__name__}
            )

        try:
            doc = Document(self.parse_actor(actor)) if actor is not None else Document()
        except ValueError as e:
            raise EncodeError(f"Invalid actor id {actor!r}: {e}", context={"actor": actor}) from e

        with doc.transaction() as tx:
            self._write_document(tx, value)

        self.logger.debug(f"Created document with {len(value)} root keys")
        return doc

    def serialize(self, doc: Document) -> bytes:
        return bytes(doc.save())

    def deserialize(self, binary: bytes, actor: Optional[str] = None) -> Document:
        doc = Document.load(bytes(binary))
        if actor is not None:
            try:
                doc.set_actor(self.parse_actor(actor))
            except ValueError as e:
                raise DecodeError(f"Invalid actor id {actor!r}: {e}", context={"actor": actor}) from e
        return doc

    def materialize(self, doc: Document) -> JsonValue:
        root: Dict[str, Any] = {}
        # (object id, object type, container being filled)
        pending: List[Tuple[Any, ObjType, Any]] = [(ROOT, ObjType.Map, root)]

        while pending:
            obj_id, obj_type, target = pending.pop()
            if obj_type == ObjType.Map:
                for key in doc.keys(obj_id):
                    target[key] = self._read_prop(doc, obj_id, key, pending)
            else:
                for index in range(doc.length(obj_id)):
                    target.append(self._read_prop(doc, obj_id, index, pending))

        return root

    def _write_document(self, tx: Any, data: Dict[str, Any]) -> None:
        """
        Copy data into the document without recursion.

        Child objects are created in place while their contents are queued,
        so nesting depth is not limited by the interpreter stack. An exit
        entry keeps the ancestor set equal to the current path, which is
        what cycle detection needs.
        """
        ancestors: Set[int] = set()
        stack: List[Tuple[Any, Any, bool]] = [(ROOT, data, False)]

        while stack:
            obj_id, container, leaving = stack.pop()
            if leaving:
                ancestors.remove(id(container))
                continue

            if id(container) in ancestors:
                raise EncodeError("Cannot create a document from a value with circular references")
            ancestors.add(id(container))
            stack.append((obj_id, container, True))

            if isinstance(container, dict):
                for key in container:
                    if not isinstance(key, str):
                        raise EncodeError(f"Object keys must be strings, got {type(key).__name__}")
                props = container.items()
                insert = False
            else:
                props = enumerate(container)
                insert = True

            for prop, item in props:
                if isinstance(item, dict):
                    child = (tx.insert_object if insert else tx.put_object)(obj_id, prop, ObjType.Map)
                    stack.append((child, item, False))
                elif isinstance(item, (list, tuple)):
                    child = (tx.insert_object if insert else tx.put_object)(obj_id, prop, ObjType.List)
                    stack.append((child, item, False))
                else:
                    scalar_type = self._scalar_type(item)
                    if scalar_type == ScalarType.Bytes:
                        item = bytes(item)
                    (tx.insert if insert else tx.put)(obj_id, prop, scalar_type, item)

    @staticmethod
    def _scalar_type(item: Any) -> ScalarType:
        # bool before int: bool is an int subclass
        if item is None:
            return ScalarType.Null
        if isinstance(item, bool):
            return ScalarType.Boolean
        if isinstance(item, int):
            return ScalarType.Int
        if isinstance(item, float):
            return ScalarType.F64
        if isinstance(item, str):
            return ScalarType.Str
        if isinstance(item, (bytes, bytearray)):
            return ScalarType.Bytes
        raise EncodeError(
            f"Cannot store value of type {type(item).__name__} in a document",
            context={"type": type(item).__name__}
        )

    @staticmethod
    def _read_prop(doc: Document, obj_id: Any, prop: Any,
                   pending: List[Tuple[Any, ObjType, Any]]) -> Any:
        """Read one property; nested maps and lists are queued on pending."""
        found = doc.get(obj_id, prop)
        if found is None:
            return None

        value, child_id = found
        if isinstance(value, ObjType):
            if value == ObjType.Map:
                child: Any = {}
            elif value == ObjType.List:
                child = []
            else:
                return doc.text(child_id)
            pending.append((child_id, value, child))
            return child

        scalar_type, scalar = value
        if scalar_type == ScalarType.Bytes:
            # the binding hands byte scalars back as a list of ints
            return bytes(scalar)
        return scalar
