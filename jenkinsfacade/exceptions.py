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
.. module:: jenkinsfacade.exceptions
    :platform: Unix, Windows
    :synopsis: Exception types raised by the Jenkins client
'''


class JenkinsException(Exception):
    '''General exception type for jenkins-API-related failures.'''
    pass


class TransportError(JenkinsException):
    '''The transport could not complete the HTTP exchange.'''
    pass


class TimeoutException(TransportError):
    '''A special exception to call out in the case of a socket timeout.'''


class RequestFailed(JenkinsException):
    '''The server answered with a status code outside of [200, 399].

    :param message: what was being attempted, ``str``
    :param status_code: HTTP status of the response, ``int``
    '''

    def __init__(self, message, status_code=None):
        super(RequestFailed, self).__init__(message)
        self.status_code = status_code


class MalformedResponse(JenkinsException):
    '''The response body did not decode to the expected JSON object.'''
    pass


class JobAlreadyExistsException(JenkinsException):
    '''Job creation was refused because the name is already taken.'''
    pass
