# cryptoprims

Collision-resistant hashes and commitments in pure Python. The package needs
only the standard library.

## What is in it

| Module | Contents |
| --- | --- |
| `cryptoprims.curve` | `TwistedEdwardsCurve`, `Point` (addition, negation, scalar multiplication, doubling, subgroup check, `to_uncompressed_bytes`), `field_element_to_bytes`, and the ready-made curve `JUBJUB` |
| `cryptoprims.pedersen_crh` | `Window`, `PedersenParameters`, `PedersenCRH`, `PedersenTwoToOneCRH`, `bytes_to_bits` |
| `cryptoprims.bowe_hopwood` | `BoweHopwoodParameters`, `BoweHopwoodCRH`, `BoweHopwoodTwoToOneCRH`, `max_chunks_in_segment`, `CHUNK_SIZE` |
| `cryptoprims.injective_map` | `InjectiveMap`, `TECompressor` (keeps the x coordinate), `PedersenCRHCompressor`, `PedersenTwoToOneCRHCompressor` |
| `cryptoprims.commitment` | `PedersenCommitment`, `PedersenCommitmentParameters`, `PedersenCommCompressor`, `Blake2sCommitment` |
| `cryptoprims.sha256` | incremental `Sha256` (`update`, `finalize`, `copy`, `Sha256.digest`), `Sha256CRH`, `Sha256TwoToOneCRH` |
| `cryptoprims.schemes` | abstract interfaces `CRHScheme`, `TwoToOneCRHScheme`, `CommitmentScheme`, `AsymmetricEncryptionScheme` |
| `cryptoprims.errors` | `CryptoError` and its subclasses `IncorrectInputLength`, `NotPrimeOrder`, `SerializationError`; `to_uncompressed_bytes` |

Every scheme takes a `random.Random` in `setup`. Calls with the same seed give
the same parameters.

## Install

```
pip install .
```

To also install the test tools:

```
pip install .[test]
```

## Usage

```python
import random

from cryptoprims.curve import JUBJUB
from cryptoprims.pedersen_crh import PedersenCRH, Window
from cryptoprims.bowe_hopwood import BoweHopwoodCRH
from cryptoprims.commitment import Blake2sCommitment, PedersenCommitment
from cryptoprims.sha256 import Sha256

rng = random.Random(0)

# Pedersen hash: 9 windows of 127 bits, output is a curve point.
crh = PedersenCRH(Window(window_size=127, num_windows=9), JUBJUB)
params = crh.setup(rng)
point = crh.evaluate(params, b"hello")

# Bowe-Hopwood hash: output is the x coordinate (an int).
bh = BoweHopwoodCRH(Window(window_size=63, num_windows=8), JUBJUB)
x = bh.evaluate(bh.setup(rng), bytes([1, 2, 3]))

# Pedersen commitment with a scalar as randomness.
comm = PedersenCommitment(Window(window_size=4, num_windows=9), JUBJUB)
c = comm.commit(comm.setup(rng), b"\x01\x01\x01\x01", JUBJUB.random_scalar(rng))

# BLAKE2s commitment: the randomness must be exactly 32 bytes.
blake = Blake2sCommitment()
opening = bytes(rng.getrandbits(8) for _ in range(32))
digest = blake.commit(blake.setup(rng), b"message", opening)

# Incremental SHA-256; finalize() leaves the hasher usable.
h = Sha256()
h.update(b"abc")
assert h.finalize() == Sha256.digest(b"abc")
```

## Limits and errors

- The window parameters bound the input of the Pedersen and Bowe–Hopwood
  hashes and of the Pedersen commitment. A longer input raises
  `IncorrectInputLength`. A shorter input is padded with zero bytes.
- The two-to-one hashes need `left` and `right` of equal length. If the
  lengths differ they raise `ValueError`.
- Parameters whose generator count does not match the window raise
  `ValueError`.
- `BoweHopwoodCRH.setup` raises `ValueError` when the window size is larger
  than `max_chunks_in_segment` for the curve's scalar field.
- `Blake2sCommitment.commit` raises `IncorrectInputLength` unless the
  randomness is 32 bytes.
- Every error the package defines derives from `cryptoprims.errors.CryptoError`.

## What it does not do

- `AsymmetricEncryptionScheme` is an interface only. The package ships no
  encryption scheme that implements it.
- There are no pseudo-random functions, signatures, Merkle trees, sponges or
  Poseidon hashes.
- There is no constraint-system (circuit) version of any primitive.
- The package has no command-line tool.
- The code is plain Python integer arithmetic. It is not constant-time.

## Tests

```
pytest
```