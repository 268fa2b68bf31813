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

__all__ = ['b64url_decode', 'is_base64', 'os2ip']

import base64
import re

from Cryptodome.Util.number import bytes_to_long

_b64url_re = re.compile(r'^[A-Za-z0-9_-]*={0,2}\Z')
_b64_re = re.compile(r'^[A-Za-z0-9+/]*={0,2}\Z')


def b64url_decode(data):
    """Decode a base64url string (RFC 4648, section 5).

    Trailing padding is optional. Characters outside the URL-safe
    alphabet are rejected rather than skipped.

    Args:
      data (string or bytes): the encoded text

    Returns:
      bytes: the decoded data

    Raises:
      ValueError: if ``data`` is not valid base64url
    """

    if isinstance(data, bytes):
        data = data.decode('ascii', 'replace')
    if not isinstance(data, str):
        raise ValueError("base64url data must be a string")
    if not _b64url_re.match(data):
        raise ValueError("Invalid characters in base64url data")

    data = data.rstrip('=')
    if len(data) % 4 == 1:
        raise ValueError("Invalid length of base64url data")
    data += '=' * (-len(data) % 4)
    return base64.urlsafe_b64decode(data)


def os2ip(octets):
    """Convert a big endian octet string into a non-negative integer."""
    return bytes_to_long(octets)


def is_base64(data):
    """Whether ``data`` only uses the standard base64 alphabet (RFC 4648,
    section 4), with at most two trailing padding characters."""
    return _b64_re.match(data) is not None
