# typesafety

Small, explicit building blocks that make intent visible in code and catch
mistakes early. Nothing outside the standard library is needed.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

### Constraints (`typesafety.constraints`)

Predicates that check a value against bounds. Each one is called with a
value and returns a `bool`:

- `Less(bound)`, `LessEqual(bound)`, `Greater(bound)` and
  `GreaterEqual(bound)` each check against a single bound.
- `Bounded(lower, upper, lower_inclusive, upper_inclusive)` checks against
  two bounds. Its `lower_constraint` and `upper_constraint` properties give
  the single-bound checks it is built from. `is_closed` tells whether both
  bounds are valid values.
- `open_interval(lower, upper)` excludes both bounds.
  `closed_interval(lower, upper)` includes both.
- `ConstrainError` is a `ValueError` for values that break a constraint. It
  keeps the offending `value` and the `constraint`.

```python
from typesafety.constraints import closed_interval, open_interval

assert closed_interval(0, 100)(100)
assert not open_interval(0, 100)(100)
```

### References (`typesafety.object_ref`, `typesafety.function_ref`)

- `ref(obj)` returns an `ObjectRef`. A reference must point at an object,
  so `None` is rejected with `TypeError`. Two references are equal when they
  point at the same object, and a reference equals the object it points at.
  - `get()` returns the object.
  - `map(func, *args)` returns a reference to the result of
    `func(obj, *args)`.
  - `copy_of(reference)` returns a shallow copy of the object.
  - `with_ref(reference, func, *args)` calls `func(obj, *args)`.
- `FunctionRef(func)` holds a callable and forwards calls to it. It can be
  rebound with `assign(func)`. If it is built from another `FunctionRef`, it
  refers to the same callable. `None` and objects that cannot be called are
  rejected with `TypeError`.

### Output parameters (`typesafety.output_parameter`)

An `OutputParameter` makes it obvious at the call site that a function
writes a result. The function can assign the result but cannot read it.
The target is either a `Box`, which is a plain mutable holder, or a
`Deferred`, which has no value until one is assigned.

`out(target, factory=None)` creates the parameter. `assign(*args)` stores
the value and returns it. With a factory, the value is `factory(*args)`;
without one, `assign` takes exactly one value.

```python
import io
from typesafety.output_parameter import Box, Deferred, out, read_concatenated

result = Deferred()
found = read_concatenated(io.StringIO("hello world"), out(result, str))
assert found and result.value() == "helloworld"

box = Box("")
out(box).assign("abc")
assert box.value == "abc"
```

`read_concatenated(stream, output)` joins all whitespace-separated words of
a text stream, assigns the result, and returns whether any text was read.

### Variants (`typesafety.variant`, `typesafety.variant_policy`)

A `BasicVariant` holds at most one value out of a fixed list of distinct
types. A policy decides whether the variant may be empty and what remains
when creating a value of a new type raises:

- `OptionalPolicy` allows the empty state and leaves the variant empty.
- `FallbackPolicy(fallback)` stores `fallback()` instead and re-raises the
  error.
- `RarelyEmptyPolicy` and `NeverEmptyPolicy` create the new value before
  dropping the old one, so the old value stays.

`variant(*types)` returns a constructor for variants over the given types.
If the first type is `NullVar`, the variant may be empty and uses
`OptionalPolicy`; otherwise it uses `RarelyEmptyPolicy`.
`fallback_variant(fallback, *types)` returns a constructor that uses
`FallbackPolicy`. The constructor takes nothing or `nullvar` to start
empty, a single value, or a type followed by the arguments to build it.

```python
from typesafety.variant import variant, with_variant
from typesafety.variant_policy import NullVar

IntOrStr = variant(NullVar, int, str)
v = IntOrStr()
v.emplace(int, 3)
assert v.value(int) == 3
assert v.optional_value(str) is None
v.reset()
assert not v
```

Other operations:

- `has_value(kind=None)` tells whether the variant holds a value, or a
  value of the given type.
- `value(kind)` raises `TypeError` for a type the variant cannot hold and
  `ValueError` when the variant holds something else.
- `value_or(kind, default)` returns the stored value, or `default`
  converted to `kind`.
- `map(func, *args)` accepts a callable or a mapping from type to callable.
- `swap(other)` exchanges the contents of two variants.
- Comparisons order first by the position of the stored type. An empty
  variant comes first.
- `with_variant(var, func, *args)` calls `func` with the stored value, if
  there is one.

`TaggedStorage` is the underlying holder of a value and its type. It is
what policies operate on.

## What it does not do

There are no flag sets, no value wrappers that enforce or clamp bounds, and
no views onto parts of sequences. The constraints above only check values;
nothing in the package raises `ConstrainError` on its own.