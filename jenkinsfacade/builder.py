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
.. module:: jenkinsfacade.builder
    :platform: Unix, Windows
    :synopsis: Assembly of the HTTP calls issued by the Jenkins client

Every logical operation of the client maps to exactly one
:class:`PreparedCall`. Paths are relative to the server URL. View names
are percent-encoded; job and computer names are inserted as given.
POST calls carry the crumb header whenever crumbs are enabled, GET calls
never do.
'''

import collections
from urllib.parse import quote, urlencode

from jenkinsfacade import endpoints

XML_CONTENT_TYPE = 'Content-Type: text/xml'
FORM_CONTENT_TYPE = 'Content-Type: application/x-www-form-urlencoded'

PreparedCall = collections.namedtuple(
    'PreparedCall', ['method', 'path', 'headers', 'body'])


class RequestBuilder(object):

    def __init__(self, crumbs):
        '''
        :param crumbs: crumb state consulted for mutating calls,
                       :class:`jenkinsfacade.crumb.CrumbManager`
        '''
        self.crumbs = crumbs

    def _get(self, path):
        return PreparedCall('GET', path, [], None)

    def _post(self, path, headers=None, body=None):
        headers = list(headers or [])
        if self.crumbs.is_enabled():
            headers.append(self.crumbs.header())
        if isinstance(body, str):
            body = body.encode('utf-8')
        return PreparedCall('POST', path, headers, body)

    def info(self):
        return self._get(endpoints.INFO)

    def version(self):
        return self._get('')

    def raw(self, uri):
        return self._get(uri.lstrip('/'))

    def job_info(self, name):
        return self._get(endpoints.JOB_INFO % locals())

    def create_job(self, name, config_xml):
        return self._post(endpoints.CREATE_JOB % locals(),
                          [XML_CONTENT_TYPE], config_xml)

    def get_job_config(self, name):
        return self._get(endpoints.CONFIG_JOB % locals())

    def set_job_config(self, name, config_xml):
        return self._post(endpoints.CONFIG_JOB % locals(),
                          [XML_CONTENT_TYPE], config_xml)

    def delete_job(self, name):
        return self._post(endpoints.DELETE_JOB % locals())

    def launch_job(self, name, parameters=None):
        '''Trigger a build, with or without parameters.

        ``build`` and ``buildWithParameters`` behave differently on the
        server side, the latter is only used when at least one parameter
        is given.

        :param name: Name of Jenkins job, ``str``
        :param parameters: build parameters, ``dict`` or
            ``list of two membered tuples``
        '''
        if not parameters:
            return self._post(endpoints.BUILD_JOB % locals())
        return self._post(endpoints.BUILD_WITH_PARAMS_JOB % locals(),
                          [FORM_CONTENT_TYPE], urlencode(parameters))

    def build_info(self, name, number, tree=None):
        path = endpoints.BUILD_INFO % locals()
        if tree is not None:
            path += endpoints.BUILD_TREE_QUERY % locals()
        return self._get(path)

    def console_text(self, name, number):
        return self._get(endpoints.BUILD_CONSOLE_OUTPUT % locals())

    def test_report(self, name, number):
        return self._get(endpoints.BUILD_TEST_REPORT % locals())

    def queue(self):
        return self._get(endpoints.Q_INFO)

    def cancel_queue(self, id):
        return self._post(endpoints.CANCEL_QUEUE % locals())

    def view_info(self, name):
        name = quote(name, safe='')
        return self._get(endpoints.VIEW_INFO % locals())

    def computers(self):
        return self._get(endpoints.NODE_LIST)

    def computer_info(self, name):
        return self._get(endpoints.NODE_INFO % locals())

    def computer_config(self, name):
        return self._get(endpoints.CONFIG_NODE % locals())

    def toggle_offline(self, name):
        return self._post(endpoints.TOGGLE_OFFLINE % locals())

    def delete_computer(self, name):
        return self._post(endpoints.DELETE_NODE % locals())

    def executor_info(self, name, number):
        return self._get(endpoints.EXECUTOR_INFO % locals())

    def stop_executor(self, name, number):
        return self._post(endpoints.STOP_EXECUTOR % locals())
