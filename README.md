# dtlsproto

Message types and cipher suite definitions for the DTLS protocol.
It uses only the standard library.

## What it provides

- `dtlsproto.alert` holds `Alert`, `AlertLevel` and `AlertDescription`.
  An alert is a level byte followed by a description byte. Unknown
  values decode to `AlertLevel.INVALID` or `AlertDescription.INVALID`.
- `dtlsproto.change_cipher_spec` holds `ChangeCipherSpec`. It is the
  one-byte message, value 1, that signals a switch of cipher state.
- `dtlsproto.application_data` holds `ApplicationData`, opaque payload
  bytes. Decoding takes every byte given.
- `dtlsproto.compression_methods` holds `CompressionMethods`,
  `CompressionMethodId` and `default_compression_methods()`. A list
  is a one-byte count followed by one byte per method. Decoding drops
  any method other than `NULL`.
- `dtlsproto.client_certificate_type` holds `ClientCertificateType`:
  `RSA_SIGN`, `ECDSA_SIGN` and `UNSUPPORTED`. Unknown values map to
  `UNSUPPORTED`.
- `dtlsproto.cipher_suite` holds the following:
  - `CipherSuiteId`, `CipherSuiteHash` and `CcmTagLength`.
  - The suite classes, all derived from the abstract `CipherSuite`:
    `CipherSuiteAes128Ccm`, `CipherSuiteAes128GcmSha256`,
    `CipherSuiteAes256CbcSha` and `CipherSuiteTlsPskWithAes128GcmSha256`.
  - The factories `new_cipher_suite_tls_ecdhe_ecdsa_with_aes_128_ccm()`,
    `new_cipher_suite_tls_ecdhe_ecdsa_with_aes_128_ccm8()`,
    `new_cipher_suite_tls_psk_with_aes_128_ccm()` and
    `new_cipher_suite_tls_psk_with_aes_128_ccm8()`.
  - The helpers `cipher_suite_for_id`, `cipher_suites_for_ids`,
    `default_cipher_suites`, `all_cipher_suites` and
    `parse_cipher_suites`.
- `dtlsproto.errors` holds `DtlsError` and its subclasses
  `TruncatedDataError`, `InvalidCipherSpecError`,
  `InvalidCipherSuiteError` and `NoAvailableCipherSuitesError`.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Usage

Every message type has three methods:

- `marshal()` returns the encoded bytes.
- The class method `unmarshal(data)` builds a message from bytes.
- `size()` gives the encoded length.

```python
from dtlsproto.alert import Alert, AlertLevel, AlertDescription

alert = Alert.unmarshal(b"\x02\x0a")
assert alert.alert_level is AlertLevel.FATAL
assert alert.alert_description is AlertDescription.UNEXPECTED_MESSAGE
assert alert.marshal() == b"\x02\x0a"
print(alert)  # Alert LevelFatal: UnexpectedMessage
```

Input that is too short raises `TruncatedDataError`. That error carries
the attributes `needed` and `available`. A change cipher spec byte
other than 1 raises `InvalidCipherSpecError`:

```python
from dtlsproto.change_cipher_spec import ChangeCipherSpec
from dtlsproto.errors import InvalidCipherSpecError

try:
    ChangeCipherSpec.unmarshal(b"\x00")
except InvalidCipherSpecError as exc:
    print(exc)  # cipher spec invalid
```

### Cipher suites

Each suite object exposes these properties:

- `id`, a `CipherSuiteId`.
- `certificate_type`, a `ClientCertificateType`.
- `is_psk`.
- `hash_func`, which is always `CipherSuiteHash.SHA256`. Its `size()`
  is 32.

Each suite also has the key-schedule lengths `prf_mac_len`,
`prf_key_len` and `prf_iv_len`. `str(suite)` gives the IANA name.

```python
from dtlsproto.cipher_suite import CipherSuiteId, cipher_suite_for_id, parse_cipher_suites

suite = cipher_suite_for_id(CipherSuiteId.TLS_PSK_WITH_AES_128_CCM_8)
print(suite, suite.is_psk)  # TLS_PSK_WITH_AES_128_CCM_8 True

suites = parse_cipher_suites([], exclude_psk=True, exclude_non_psk=False)
print([str(s) for s in suites])

psk_only = parse_cipher_suites(
    [CipherSuiteId.TLS_PSK_WITH_AES_128_CCM_8],
    exclude_psk=False,
    exclude_non_psk=True,
)
```

Some rules for selecting suites:

- An empty selection falls back to `default_cipher_suites()`, in order
  of preference: ECDHE-ECDSA AES-128-GCM, then ECDHE-ECDSA AES-256-CBC,
  then the two RSA variants in the same order.
- An identifier with no suite raises `InvalidCipherSuiteError`.
- `NoAvailableCipherSuitesError` is raised when filtering leaves no
  suite.

## What it does not do

This package describes messages and suites. It does not run the
protocol.

- It has no handshake and no record-layer header.
- It has no key derivation and no encryption or decryption. Cipher
  suite objects only describe a suite; they hold no keys.
- It does not open connections or listeners, and has no command-line
  tool.