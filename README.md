# circuitwrap

`circuitwrap` puts a circuit breaker in front of any object. Each method
called through the wrapper goes through the breaker. When calls raise
exceptions several times in a row, the circuit opens. While it is open, calls
fail at once with `CircuitOpenError` and the wrapped object is not called.
After a set interval the circuit lets calls through again. If the first call
after that interval fails too, the circuit opens again straight away. A
successful call resets the count of consecutive errors and closes the circuit.

## Installation

```
pip install circuitwrap
```

## Usage

```python
from datetime import timedelta

from circuitwrap.circuitbreaker import CircuitBreaker, CircuitOpenError

class Backend:
    def fetch(self, key):
        ...

# Open after 3 consecutive errors and stay open for 5 seconds.
backend = CircuitBreaker(Backend(), 3, 5.0)
# The open interval may also be a timedelta.
backend = CircuitBreaker(Backend(), 3, timedelta(seconds=5))

try:
    value = backend.fetch("answer")   # forwarded to Backend.fetch
except CircuitOpenError:
    value = None                      # the circuit is open; Backend was not called
```

Attribute access on the wrapper is passed on to the wrapped object. Callable
attributes come back wrapped in the breaker; other attributes come back as
they are. Names that start with an underscore are not passed on.

`call` runs any callable through the same breaker. It also takes the name of
a method of the wrapped object:

```python
backend.call(some_function, 1, 2, flag=True)
backend.call("fetch", "answer")
```

`is_open()` reports whether the circuit is open at the moment.

The exception raised by a failing call always reaches the caller unchanged;
the breaker only counts it. `CircuitOpenError` carries the message
`"CircuitBreaker: circuit is open"`.

### Ignoring some errors

Extra positional arguments after the open interval name errors that do not
count as failures. Each may be an exception class (matched with
`isinstance`) or a particular exception instance (matched by identity). An
exception also matches when one of the exceptions in its `__cause__` chain
does. An ignored exception is still raised to the caller, but it resets the
count of consecutive errors and closes the circuit, the way a success does:

```python
backend = CircuitBreaker(Backend(), 3, 5.0, KeyError, LookupError)
```

## Running the tests

```
pip install -e ".[test]"
pytest
```