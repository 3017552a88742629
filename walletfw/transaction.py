"""Bitcoin script building and transaction serialization."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

_OP_PUSHDATA1 = 0x4C
_OP_PUSHDATA2 = 0x4D
_OP_PUSHDATA4 = 0x4E
_OP_1_BASE = 0x50
_OP_CHECKMULTISIG = 0xAE
_SIGHASH_ALL = 1
_PUBKEY_LEN = 33
_MAX_MULTISIG = 15


def op_push(i: int) -> bytes:
    """Return the opcode prefix that pushes ``i`` bytes of data."""
    if i < 0:
        raise ValueError("push length must not be negative")
    if i < _OP_PUSHDATA1:
        return bytes([i])
    if i < 0xFF:
        return bytes([_OP_PUSHDATA1, i])
    if i < 0xFFFF:
        return bytes([_OP_PUSHDATA2]) + i.to_bytes(2, "little")
    return bytes([_OP_PUSHDATA4]) + (i & 0xFFFFFFFF).to_bytes(4, "little")


def _ser_length(n: int) -> bytes:
    """Encode ``n`` as a compact-size length."""
    if n < 0:
        raise ValueError("length must not be negative")
    if n < 253:
        return bytes([n])
    if n <= 0xFFFF:
        return b"\xfd" + n.to_bytes(2, "little")
    return b"\xfe" + (n & 0xFFFFFFFF).to_bytes(4, "little")


def _check_multisig(m: int, pubkeys: list[bytes]) -> list[bytes]:
    keys = [bytes(k) for k in pubkeys]
    if not 1 <= m <= _MAX_MULTISIG:
        raise ValueError(f"m must be between 1 and {_MAX_MULTISIG}, got {m}")
    if not 1 <= len(keys) <= _MAX_MULTISIG:
        raise ValueError(f"need between 1 and {_MAX_MULTISIG} public keys, got {len(keys)}")
    for key in keys:
        if len(key) != _PUBKEY_LEN:
            raise ValueError(f"public keys must be {_PUBKEY_LEN} bytes, got {len(key)}")
    return keys


def compile_script_multisig(m: int, pubkeys: list[bytes]) -> bytes:
    """Return the m-of-n CHECKMULTISIG redeem script for compressed keys."""
    keys = _check_multisig(m, pubkeys)
    parts = [bytes([_OP_1_BASE + m])]
    parts.extend(bytes([_PUBKEY_LEN]) + key for key in keys)
    parts.append(bytes([_OP_1_BASE + len(keys), _OP_CHECKMULTISIG]))
    return b"".join(parts)


def compile_script_multisig_hash(m: int, pubkeys: list[bytes]) -> bytes:
    """Return the SHA-256 of the multisig redeem script."""
    return hashlib.sha256(compile_script_multisig(m, pubkeys)).digest()


def serialize_script_sig(signature: bytes, pubkey: bytes) -> bytes:
    """Return a pay-to-pubkey-hash scriptSig with SIGHASH_ALL."""
    signature = bytes(signature)
    pubkey = bytes(pubkey)
    return (
        op_push(len(signature) + 1)
        + signature
        + bytes([_SIGHASH_ALL])
        + op_push(len(pubkey))
        + pubkey
    )


def serialize_script_multisig(m: int, pubkeys: list[bytes], signatures: list[bytes]) -> bytes:
    """Return a multisig scriptSig; empty signatures are left out."""
    script = compile_script_multisig(m, pubkeys)
    parts = [b"\x00"]
    for signature in map(bytes, signatures):
        if not signature:
            continue
        parts.append(op_push(len(signature) + 1) + signature + bytes([_SIGHASH_ALL]))
    parts.append(op_push(len(script)) + script)
    return b"".join(parts)


def estimate_size(inputs: int, outputs: int) -> int:
    """Return an upper estimate of the transaction size in bytes."""
    return 10 + inputs * 149 + outputs * 35


def estimate_size_kb(inputs: int, outputs: int) -> int:
    """Return the estimated size in kilobytes, rounded up."""
    return (estimate_size(inputs, outputs) + 999) // 1000


@dataclass(frozen=True)
class TxInput:
    """A transaction input; ``prev_hash`` is in display (big-endian) order."""

    prev_hash: bytes
    prev_index: int
    script_sig: bytes = b""
    sequence: int = 0xFFFFFFFF

    def __post_init__(self) -> None:
        object.__setattr__(self, "prev_hash", bytes(self.prev_hash))
        object.__setattr__(self, "script_sig", bytes(self.script_sig))
        if len(self.prev_hash) != 32:
            raise ValueError("prev_hash must be 32 bytes")

    def to_bytes(self) -> bytes:
        return (
            self.prev_hash[::-1]
            + self.prev_index.to_bytes(4, "little")
            + _ser_length(len(self.script_sig))
            + self.script_sig
            + self.sequence.to_bytes(4, "little")
        )


@dataclass(frozen=True)
class TxOutput:
    """A compiled transaction output."""

    amount: int
    script_pubkey: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "script_pubkey", bytes(self.script_pubkey))

    def to_bytes(self) -> bytes:
        return (
            self.amount.to_bytes(8, "little")
            + _ser_length(len(self.script_pubkey))
            + self.script_pubkey
        )


class _TxStream:
    """Tracks progress through a transaction fed one input/output at a time."""

    def __init__(
        self,
        inputs_len: int,
        outputs_len: int,
        version: int = 1,
        lock_time: int = 0,
        add_hash_type: bool = False,
    ) -> None:
        self.inputs_len = inputs_len
        self.outputs_len = outputs_len
        self.version = version
        self.lock_time = lock_time
        self.add_hash_type = add_hash_type
        self.have_inputs = 0
        self.have_outputs = 0
        self.size = 0

    def _input_bytes(self, tx_input: TxInput) -> bytes:
        if self.have_inputs >= self.inputs_len:
            raise ValueError("all inputs have already been added")
        data = b""
        if self.have_inputs == 0:
            data += self.version.to_bytes(4, "little") + _ser_length(self.inputs_len)
        data += tx_input.to_bytes()
        self.have_inputs += 1
        self.size += len(data)
        return data

    def _output_bytes(self, tx_output: TxOutput) -> bytes:
        if self.have_inputs < self.inputs_len:
            raise ValueError("not all inputs have been added")
        if self.have_outputs >= self.outputs_len:
            raise ValueError("all outputs have already been added")
        data = b""
        if self.have_outputs == 0:
            data += _ser_length(self.outputs_len)
        data += tx_output.to_bytes()
        self.have_outputs += 1
        if self.have_outputs == self.outputs_len:
            data += self.lock_time.to_bytes(4, "little")
            if self.add_hash_type:
                data += _SIGHASH_ALL.to_bytes(4, "little")
        self.size += len(data)
        return data


class TxSerializer(_TxStream):
    """Produces the raw transaction bytes piece by piece."""

    def __init__(
        self,
        inputs_len: int,
        outputs_len: int,
        version: int = 1,
        lock_time: int = 0,
        add_hash_type: bool = False,
    ) -> None:
        super().__init__(inputs_len, outputs_len, version, lock_time, add_hash_type)

    def serialize_input(self, tx_input: TxInput) -> bytes:
        """Return the bytes for the next input, with the header before the first."""
        return self._input_bytes(tx_input)

    def serialize_output(self, tx_output: TxOutput) -> bytes:
        """Return the bytes for the next output, with the footer after the last."""
        return self._output_bytes(tx_output)


class TxHasher(_TxStream):
    """Hashes a transaction without keeping its bytes."""

    def __init__(
        self,
        inputs_len: int,
        outputs_len: int,
        version: int = 1,
        lock_time: int = 0,
        add_hash_type: bool = False,
    ) -> None:
        super().__init__(inputs_len, outputs_len, version, lock_time, add_hash_type)
        self._ctx = hashlib.sha256()

    def add_input(self, tx_input: TxInput) -> int:
        """Hash the next input; return the number of bytes it contributed."""
        data = self._input_bytes(tx_input)
        self._ctx.update(data)
        return len(data)

    def add_output(self, tx_output: TxOutput) -> int:
        """Hash the next output; return the number of bytes it contributed."""
        data = self._output_bytes(tx_output)
        self._ctx.update(data)
        return len(data)

    def digest(self, reverse: bool = False) -> bytes:
        """Return the double SHA-256, byte-reversed if ``reverse`` is set."""
        result = hashlib.sha256(self._ctx.digest()).digest()
        return result[::-1] if reverse else result