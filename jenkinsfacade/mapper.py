#!/usr/bin/env python
# Software License Agreement (BSD License)
#
# Copyright (c) 2010, Willow Garage, Inc.
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions
# are met:
#
#  * Redistributions of source code must retain the above copyright
#    notice, this list of conditions and the following disclaimer.
#  * Redistributions in binary form must reproduce the above
#    copyright notice, this list of conditions and the following
#    disclaimer in the documentation and/or other materials provided
#    with the distribution.
#  * Neither the name of Willow Garage, Inc. nor the names of its
#    contributors may be used to endorse or promote products derived
#    from this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS
# 'AS IS' AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT
# LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS
# FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE
# COPYRIGHT OWNER OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING,
# BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES;
# LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER
# CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT
# LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN
# ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

'''
.. module:: jenkinsfacade.mapper
    :platform: Unix, Windows
    :synopsis: Decoding of responses into Jenkins objects

Decoding yields one of three results: :class:`Found` holding a JSON
object, :class:`Absent` when a status-gated lookup hit a non-2xx status,
or :class:`Malformed` when the body is not a JSON object. Each client
operation decides what those outcomes mean for its callers.
'''

import json

from jenkinsfacade.exceptions import MalformedResponse
from jenkinsfacade import models


class Found(object):
    found = True

    def __init__(self, payload):
        self.payload = payload

    def __repr__(self):
        return '<Found>'


class Absent(object):
    found = False

    def __init__(self, status_code):
        self.status_code = status_code

    def __repr__(self):
        return '<Absent status=%s>' % self.status_code


class Malformed(object):
    found = False

    def __init__(self, detail):
        self.detail = detail

    def __repr__(self):
        return '<Malformed %s>' % self.detail


def decode(response):
    '''Decode the body of ``response`` as a JSON object.

    :returns: :class:`Found` or :class:`Malformed`
    '''
    try:
        payload = json.loads(response.text)
    except ValueError as e:
        return Malformed('invalid JSON (%s)' % e)
    if not isinstance(payload, dict):
        return Malformed('expected a JSON object, got %s'
                         % type(payload).__name__)
    return Found(payload)


def lookup(response):
    '''Like :func:`decode`, but any non-2xx status gives :class:`Absent`.

    The status is looked at before the body.
    '''
    if not 200 <= response.status_code < 300:
        return Absent(response.status_code)
    return decode(response)


def expect_object(result, message):
    '''Return the payload of a :class:`Found`, raise otherwise.'''
    if isinstance(result, Found):
        return result.payload
    if isinstance(result, Malformed):
        message = '%s: %s' % (message, result.detail)
    raise MalformedResponse(message)


class ResourceMapper(object):
    '''Turns decoded payloads into :mod:`jenkinsfacade.models` objects.'''

    def __init__(self, jenkins):
        self.jenkins = models.weak_client(jenkins)

    def job(self, payload, name=None):
        return models.Job(payload, self.jenkins, name)

    def build(self, payload, job_name, number=None):
        return models.Build(payload, job_name, self.jenkins, number)

    def queue(self, payload):
        return models.Queue(payload, self.jenkins)

    def view(self, payload):
        return models.View(payload, self.jenkins)

    def computer(self, payload):
        return models.Computer(payload, self.jenkins)

    def executor(self, payload, computer, number=None):
        return models.Executor(payload, computer, self.jenkins, number)

    def test_report(self, payload, job_name, build_id):
        return models.TestReport(payload, job_name, build_id, self.jenkins)
