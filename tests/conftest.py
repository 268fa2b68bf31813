# -*- coding: utf-8 -*-
# ===================================================================
#
# Copyright (c) 2016, Legrandin <helderijs@gmail.com>
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions
# are met:
#
# 1. Redistributions of source code must retain the above copyright
#    notice, this list of conditions and the following disclaimer.
# 2. Redistributions in binary form must reproduce the above copyright
#    notice, this list of conditions and the following disclaimer in
#    the documentation and/or other materials provided with the
#    distribution.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS
# "AS IS" AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT
# LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS
# FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE
# COPYRIGHT HOLDER OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING,
# BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES;
# LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER
# CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT
# LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN
# ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.
# ===================================================================

import base64

import pytest

from Cryptodome.PublicKey import RSA as CryptoRSA
from Cryptodome.Math.Numbers import Integer
from Cryptodome.Util.number import long_to_bytes


def b64url(value):
    """Encode an integer as a JWK member."""
    raw = long_to_bytes(value)
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


@pytest.fixture(scope="session")
def reference_key():
    return CryptoRSA.generate(2048)


@pytest.fixture(scope="session")
def crt_values(reference_key):
    key = reference_key
    return {
        'n': key.n,
        'e': key.e,
        'd': key.d,
        'p': key.p,
        'q': key.q,
        'dp': key.d % (key.p - 1),
        'dq': key.d % (key.q - 1),
        'qi': int(Integer(key.q).inverse(key.p)),
    }


@pytest.fixture(scope="session")
def private_pem(reference_key):
    return reference_key.export_key(format='PEM', pkcs=1).decode("ascii")


@pytest.fixture(scope="session")
def public_pem(reference_key):
    return reference_key.public_key().export_key(format='PEM').decode("ascii")


@pytest.fixture(scope="session")
def private_jwk(crt_values):
    jwk = dict((name, b64url(value)) for name, value in crt_values.items())
    jwk['kty'] = 'RSA'
    return jwk


@pytest.fixture(scope="session")
def public_jwk(crt_values):
    return {
        'kty': 'RSA',
        'n': b64url(crt_values['n']),
        'e': b64url(crt_values['e']),
    }
