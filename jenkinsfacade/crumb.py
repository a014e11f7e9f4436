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
.. module:: jenkinsfacade.crumb
    :platform: Unix, Windows
    :synopsis: Anti-CSRF crumb handling
'''

import logging
import threading

from jenkinsfacade.builder import PreparedCall
from jenkinsfacade import endpoints
from jenkinsfacade.exceptions import MalformedResponse
from jenkinsfacade.exceptions import RequestFailed
from jenkinsfacade import mapper
from jenkinsfacade.validator import validate_response

logger = logging.getLogger(__name__)


class CrumbManager(object):
    '''Fetches the crumb from the crumb issuer and remembers it.

    Crumbs are disabled until :meth:`enable` succeeds. Servers without
    CSRF protection answer the issuer with an error, in which case crumbs
    simply stay disabled.
    '''

    def __init__(self, send):
        '''
        :param send: callable issuing a ``PreparedCall`` and returning the
                     transport ``Response``
        '''
        self._send = send
        self._lock = threading.Lock()
        self.enabled = False
        self.crumb = None
        self.crumb_request_field = None

    def request(self):
        '''Ask the crumb issuer for a crumb.

        :returns: decoded issuer answer, ``dict``
        '''
        response = self._send(PreparedCall('GET', endpoints.CRUMB_URL, [], None))
        validate_response(response, 'Error getting csrf crumb')

        result = mapper.decode(response)
        if not result.found:
            raise MalformedResponse('Error during json_decode of csrf crumb')
        data = result.payload
        if 'crumb' not in data or 'crumbRequestField' not in data:
            raise MalformedResponse('csrf crumb answer lacks crumb fields')
        return data

    def enable(self):
        with self._lock:
            try:
                data = self.request()
            except (RequestFailed, MalformedResponse) as e:
                logger.debug('Crumbs stay disabled: %s', e)
                self.enabled = False
                return
            self.crumb = data['crumb']
            self.crumb_request_field = data['crumbRequestField']
            self.enabled = True

    def disable(self):
        with self._lock:
            self.enabled = False

    def is_enabled(self):
        return self.enabled

    def header(self):
        return '%s: %s' % (self.crumb_request_field, self.crumb)
