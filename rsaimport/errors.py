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

"""Exceptions raised while importing RSA keys.

Every error is a :class:`ValueError`, the exception used for bad key
material throughout ``Cryptodome``.
"""

__all__ = ['KeyImportError', 'UnsupportedFormat', 'MissingField',
           'MalformedField', 'MalformedStructure']


class KeyImportError(ValueError):
    """Base class for all key import failures."""


class UnsupportedFormat(KeyImportError):
    """The key is neither a JWK nor a recognized PEM encoding."""


class MissingField(KeyImportError):
    """A JWK is not a mapping or lacks a mandatory member.

    :ivar field: name of the missing JWK member
    """

    def __init__(self, field, message=None):
        self.field = field
        if message is None:
            message = "RSA JWK requires member '%s'" % field
        super(MissingField, self).__init__(message)


class MalformedField(KeyImportError):
    """A JWK member is not a valid base64url encoded integer.

    :ivar field: name of the offending JWK member
    """

    def __init__(self, field, message=None):
        self.field = field
        if message is None:
            message = "Invalid encoding of JWK member '%s'" % field
        super(MalformedField, self).__init__(message)


class MalformedStructure(KeyImportError):
    """The PEM armor or the ASN.1 body does not have the expected shape."""
