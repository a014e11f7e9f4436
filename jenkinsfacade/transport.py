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
.. module:: jenkinsfacade.transport
    :platform: Unix, Windows
    :synopsis: HTTP transports used by the Jenkins client

The client only relies on :meth:`Transport.send`: a method, an absolute
URL, a list of ``"Name: value"`` header lines and an optional body go
in, a :class:`Response` comes out. HTTP error statuses are returned,
not raised; failing to talk to the server at all raises
:class:`TransportError`.
'''

import collections
import logging
import os
import socket

import requests
import requests.exceptions as req_exc
from requests.packages.urllib3.exceptions import InsecureRequestWarning

from jenkinsfacade.exceptions import TimeoutException
from jenkinsfacade.exceptions import TransportError

logger = logging.getLogger(__name__)


class Response(collections.namedtuple('Response',
                                      ['status_code', 'headers', 'body'])):
    '''Status code, headers and raw body of an HTTP response.'''

    __slots__ = ()

    @property
    def text(self):
        if self.body is None:
            return ''
        if isinstance(self.body, bytes):
            return self.body.decode('utf-8', 'replace')
        return self.body


def parse_header_lines(lines):
    '''Turn ``["Name: value", ...]`` into a header dictionary.'''
    headers = {}
    for token in lines or []:
        if ":" in token:
            header, value = token.split(":", 1)
            headers[header.strip()] = value.strip()
    return headers


class Transport(object):
    '''Contract of the object performing the HTTP exchanges.'''

    def send(self, method, url, headers=None, body=None):
        '''Perform one HTTP exchange.

        :param method: HTTP method, ``str``
        :param url: absolute URL, ``str``
        :param headers: header lines, ``["Name: value"]``
        :param body: request payload, ``bytes`` or ``None``
        :returns: :class:`Response`
        '''
        raise NotImplementedError


class WrappedSession(requests.Session):
    """A wrapper for requests.Session to override 'verify' property, ignoring REQUESTS_CA_BUNDLE environment variable.

    This is a workaround for https://github.com/kennethreitz/requests/issues/3829 (will be fixed in requests 3.0.0)
    """

    def merge_environment_settings(self, url, proxies, stream, verify, *args,
                                   **kwargs):
        if self.verify is False:
            verify = False

        return super(WrappedSession, self).merge_environment_settings(url,
                                                                      proxies,
                                                                      stream,
                                                                      verify,
                                                                      *args,
                                                                      **kwargs)


class RequestsTransport(Transport):

    def __init__(self, username=None, password=None,
                 timeout=socket._GLOBAL_DEFAULT_TIMEOUT):
        '''Create a transport backed by a ``requests`` session.

        :param username: Server username, ``str``
        :param password: Server password, ``str``
        :param timeout: Server connection timeout in secs (default: not set), ``int``
        '''
        self.timeout = timeout
        self._session = WrappedSession()

        if username is not None and password is not None:
            self._session.auth = requests.auth.HTTPBasicAuth(
                username.encode('utf-8'), password.encode('utf-8'))

        extra_headers = os.environ.get("JENKINS_API_EXTRA_HEADERS", "")
        if extra_headers:
            logger.warning("JENKINS_API_EXTRA_HEADERS adds these HTTP headers: %s",
                           extra_headers.split("\n"))
        self._session.headers.update(
            parse_header_lines(extra_headers.split("\n")))

        if os.getenv('PYTHONHTTPSVERIFY', '1') == '0':
            logger.debug('PYTHONHTTPSVERIFY=0 detected so we will '
                         'disable requests library SSL verification to keep '
                         'compatibility with older versions.')
            requests.packages.urllib3.disable_warnings(InsecureRequestWarning)
            self._session.verify = False

    @property
    def auth(self):
        return self._session.auth

    def _request(self, req):

        r = self._session.prepare_request(req)
        # requests.Session.send() does not honor env settings by design
        # see https://github.com/requests/requests/issues/2807
        _settings = self._session.merge_environment_settings(
            r.url, {}, None, self._session.verify, None)
        if self.timeout is not socket._GLOBAL_DEFAULT_TIMEOUT:
            _settings['timeout'] = self.timeout
        _settings['allow_redirects'] = False
        return self._session.send(r, **_settings)

    def send(self, method, url, headers=None, body=None):
        req = requests.Request(method, url,
                               headers=parse_header_lines(headers),
                               data=body)
        try:
            response = self._request(req)
        except req_exc.Timeout as e:
            raise TimeoutException('Error in request: %s' % (e))
        except req_exc.RequestException as e:
            raise TransportError('Error in request: %s' % (e))

        return Response(response.status_code, response.headers,
                        response.content)
