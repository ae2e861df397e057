"""
Core package for valtype simple values (descriptors, casting, configuration, specs).

## Contracts (single source of truth)
- Simple — immutable, indivisible values with set-once ``value`` and mutable ``formatted``.
- SimpleType — per-kind descriptor; ``cast`` converts, ``to_value`` validates.
- Kinds — String, Number, Boolean, Date customize ``cast`` only.
- Specs — bare value or {"_"?, "v", "f"?}; JSON helpers in serde.
- Errors — typed argument errors; never logged or wrapped by the core.

## Notes
- Zero-IO policy: stdlib + pydantic only; settings loading is the one exception.
- Message templates are injected per descriptor (see messages.MessageBundle).
- A plain dict and a sibling Simple are interchangeable configuration inputs.

## Examples
```python
from valtype.core.kinds import Number
from valtype.core.errors import ValueImmutableError

v1 = Number(5)
v1.key  # '5'
v1.value = 5  # same value: accepted silently
try:
    v1.value = 6
except ValueImmutableError:
    pass
v1.formatted = "five"
v1.to_spec()  # {'v': 5, 'f': 'five'}
v1.to_spec(require_type=True)  # {'_': 'valtype/core/number', 'v': 5, 'f': 'five'}
```

## References
- Values: [simple](simple.md), [kinds](kinds.md), [element](element.md)
- Serialization: [scope](scope.md), [serde](serde.md), [constants](constants.md)
- Errors/Messages/Config: [errors](errors.md), [messages](messages.md), [config](config.md)
"""
