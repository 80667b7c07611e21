"""Textbook RSA arithmetic on demonstration-sized integers.

Provides the numeric primitives behind an RSA key pair: random 16-bit prime generation, Euler's totient, public
exponent selection and private exponent derivation through the Extended Euclidean Algorithm. Assembling these into a
key, and everything beyond (padding, serialization, encryption), is left to the caller.

Typical usage example:

    p, q = generate_prime(), generate_prime()
    phi = totient(p, q)
    e = select_public_exponent(phi)
    d = modular_inverse(e, phi)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from lightrsa.rsamath import extended_euclidean
from lightrsa.rsamath import generate_prime
from lightrsa.rsamath import is_prime
from lightrsa.rsamath import modular_inverse
from lightrsa.rsamath import RetriesExhaustedError
from lightrsa.rsamath import RsaMath
from lightrsa.rsamath import select_public_exponent
from lightrsa.rsamath import totient

__version__ = "0.0.1"
__all__ = [
    "RsaMath",
    "RetriesExhaustedError",
    "is_prime",
    "extended_euclidean",
    "generate_prime",
    "totient",
    "select_public_exponent",
    "modular_inverse",
]
