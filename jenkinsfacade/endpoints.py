#!/usr/bin/env python
# Software License Agreement (BSD License)
#
# Copyright (c) 2015 Hewlett-Packard Development Company, L.P.
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
.. module:: jenkinsfacade.endpoints
    :platform: Unix, Windows
    :synopsis: Jenkins REST endpoint paths, relative to the server URL
'''

# REST Endpoints
INFO = 'api/json'
CRUMB_URL = 'crumbIssuer/api/json'
JOB_INFO = 'job/%(name)s/api/json'
JOB_URL = 'job/%(name)s'
CREATE_JOB = 'createItem?name=%(name)s'  # also post config.xml
CONFIG_JOB = 'job/%(name)s/config.xml'
DELETE_JOB = 'job/%(name)s/doDelete'
BUILD_JOB = 'job/%(name)s/build'
BUILD_WITH_PARAMS_JOB = 'job/%(name)s/buildWithParameters'
BUILD_URL = 'job/%(name)s/%(number)d'
BUILD_INFO = 'job/%(name)s/%(number)d/api/json'
BUILD_CONSOLE_OUTPUT = 'job/%(name)s/%(number)s/consoleText'
BUILD_TEST_REPORT = 'job/%(name)s/%(number)d/testReport/api/json'
BUILD_TREE_QUERY = '?tree=%(tree)s'
Q_INFO = 'queue/api/json'
CANCEL_QUEUE = 'queue/item/%(id)s/cancelQueue'
VIEW_URL = 'view/%(name)s'
VIEW_INFO = 'view/%(name)s/api/json'
NODE_LIST = 'computer/api/json'
NODE_INFO = 'computer/%(name)s/api/json'
CONFIG_NODE = 'computer/%(name)s/config.xml'
TOGGLE_OFFLINE = 'computer/%(name)s/toggleOffline'
DELETE_NODE = 'computer/%(name)s/doDelete'
EXECUTOR_INFO = 'computer/%(name)s/executors/%(number)s/api/json'
STOP_EXECUTOR = 'computer/%(name)s/executors/%(number)s/stop'

# Fields requested by default when fetching a single build
DEFAULT_BUILD_TREE = ('actions[parameters,parameters[name,value]],result,'
                      'duration,timestamp,number,url,estimatedDuration,'
                      'builtOn')
