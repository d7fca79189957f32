# moketensor

Small building blocks for testing numeric kernels: row-major tensors with
strides, "host" and "device" buffers that copy between each other, seeded
random fill, accuracy comparators, a wall-clock profiler and time-unit
conversion.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Arithmetic and layout

`moketensor.arithmetic` has integer helpers for sizes and alignment, and a
`Dim3` value (components default to 1) that supports `+`, `*` and `//`
element-wise.

```python
from moketensor.arithmetic import ceil_div, is_pow2, pad_down, pad_up, pad_up_pow2, Dim3

ceil_div(10, 4)        # 3
pad_down(10, 4)        # 8
pad_up(10, 4)          # 12
pad_up_pow2(10, 8)     # 16; pad_*_pow2 raise ValueError unless align is a positive power of two
is_pow2(64)            # True

ceil_div(Dim3(10, 5, 1), Dim3(4, 2, 1))   # Dim3(x=3, y=3, z=1)
```

`moketensor.layout.TensorLayout` computes contiguous row-major strides:

```python
from moketensor.layout import TensorLayout

layout = TensorLayout((2, 3, 4), 4)
layout.rank()          # 3
layout.stride(0)       # 12
layout.size()          # 24
layout.nbytes()        # 96
layout.empty()         # False
```

## Tensors

`moketensor.tensor` provides:

- `HostTensor(*shape, typecode="f")` – owns zero-initialised storage
  (an `array.array` of the given typecode) and can be indexed. Indexing a
  multi-dimensional tensor gives a `TensorIterator` over the sub-tensor;
  indexing the last dimension gives the element.
- `DeviceTensor(*shape, typecode="f")` – owns storage that is not indexable;
  data goes in with `load` and comes out with `store`, or through `view()`.
- `TensorView` – a non-owning, indexable window over existing storage.
- `host_array(length, typecode)` and `device_array(length, typecode)` for
  one-dimensional tensors.

`load` and `store` raise `TypeError` when element types differ and
`ValueError` when a side holds too few elements.

```python
from moketensor.tensor import HostTensor, host_array, device_array

x = host_array(4, "f")
x[0] = 1.5
d = device_array(4, "f")
d.load(x)
y = host_array(4, "f")
d.store(y)
y.values()             # [1.5, 0.0, 0.0, 0.0]

m = HostTensor(2, 3, typecode="d")
m[1][2] = 7.0
m[1].values()          # [0.0, 0.0, 7.0]
```

## Testing a kernel

```python
from moketensor.generator import HostRandomGenerator
from moketensor.comparator import RelativeErrorComparator
from moketensor.profiler import HostProfiler

gen = HostRandomGenerator(0)
a = gen.make_tensor(0.0, 1.0, 1024, typecode="f")
b = gen.make_tensor(0.0, 1.0, 1024, typecode="f")

baseline = [p + q for p, q in zip(a.values(), b.values())]

with HostProfiler() as prof:
    out = [p + q for p, q in zip(a.values(), b.values())]

result = RelativeErrorComparator(1e-6)(out, baseline)
result.print()
bool(result)                     # True when the maximum error is within the threshold

prof.get(ops=1024, io_bytes=3 * 1024 * 4, loops=1).print()
```

- `HostRandomGenerator(seed)` gives the same sequence for the same seed.
  `one()` returns a value in [0, 1], `one(max)` in [0, max] and
  `one(min, max)` in [min, max]. `fill` works on host tensors, views,
  `array.array` objects and lists; integer typecodes get truncated values.
- `AbsoluteErrorComparator` and `RelativeErrorComparator` (default threshold
  `1e-6`) return an `AccuracyResult` with `threshold`, `max_error` and
  `index`; they raise `ValueError` when the sequences differ in length.
- `HostProfiler.get(ops, io_bytes, loops=1)` returns a `PerformanceResult`
  with `kernel_time` (µs per loop), `compute_force` (GFLOPS) and `bandwidth`
  (GB/s). It raises `RuntimeError` without a complete measurement.
- `AccuracyResult.print(out)` and `PerformanceResult.print(out)` write to
  standard output unless a text stream is given.

## Time units

```python
from moketensor.timeunit import TimeUnit, time_convert

time_convert(1.5, TimeUnit.MSEC, TimeUnit.USEC)   # 1500.0
```

## What this package does not do

There is no accelerator support: `DeviceTensor` keeps its data in ordinary
process memory, and there are no device kernels, no device-side profiler and
no command-line benchmark runner. The package supplies the containers and
checking tools; the kernels under test are yours.