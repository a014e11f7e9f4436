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
.. module:: jenkinsfacade
    :platform: Unix, Windows
    :synopsis: Python API to interact with Jenkins

Example::

    >>> server = jenkinsfacade.Jenkins('http://localhost:8080', 'user', 'pass')
    >>> server.enable_crumbs()
    >>> job = server.get_job('my_job')
    >>> job.launch({'BRANCH': 'master'})
'''

import logging
import socket
import threading
from urllib.parse import urljoin
import warnings
import xml.etree.ElementTree as ET

from jenkinsfacade.builder import RequestBuilder
from jenkinsfacade.crumb import CrumbManager
from jenkinsfacade import endpoints
from jenkinsfacade.endpoints import DEFAULT_BUILD_TREE  # noqa: F401
from jenkinsfacade.exceptions import JenkinsException
from jenkinsfacade.exceptions import JobAlreadyExistsException
from jenkinsfacade.exceptions import MalformedResponse  # noqa: F401
from jenkinsfacade.exceptions import RequestFailed  # noqa: F401
from jenkinsfacade.exceptions import TimeoutException  # noqa: F401
from jenkinsfacade.exceptions import TransportError  # noqa: F401
from jenkinsfacade import mapper
from jenkinsfacade.models import Build, Computer, Executor, Job  # noqa: F401
from jenkinsfacade.models import JobQueue, Queue, TestReport, View  # noqa: F401
from jenkinsfacade.transport import RequestsTransport
from jenkinsfacade.transport import Response, Transport  # noqa: F401
from jenkinsfacade.validator import validate_response

# Set default logging handler to avoid "No handler found" warnings.
logging.getLogger(__name__).addHandler(logging.NullHandler())

logger = logging.getLogger(__name__)


class _RootInfo(object):
    '''Server root metadata, fetched on first use and kept afterwards.

    Nothing invalidates it: jobs or views added on the server later are
    not seen through this object.
    '''

    def __init__(self, fetch):
        self._fetch = fetch
        self._lock = threading.Lock()
        self._populated = False
        self._value = None

    @property
    def populated(self):
        return self._populated

    def get(self):
        if not self._populated:
            with self._lock:
                if not self._populated:
                    self._value = self._fetch()
                    self._populated = True
        return self._value


class Jenkins(object):

    def __init__(self, url, username=None, password=None,
                 timeout=socket._GLOBAL_DEFAULT_TIMEOUT, transport=None):
        '''Create handle to Jenkins instance.

        Failures are reported with subclasses of :class:`JenkinsException`.

        :param url: URL of Jenkins server, ``str``
        :param username: Server username, ``str``
        :param password: Server password, ``str``
        :param timeout: Server connection timeout in secs (default: not set), ``int``
        :param transport: object performing the HTTP exchanges, defaults to
            a :class:`RequestsTransport` built from the other arguments,
            :class:`Transport`
        '''
        if url[-1] == '/':
            self.server = url
        else:
            self.server = url + '/'

        if transport is None:
            transport = RequestsTransport(username, password, timeout)
        self.transport = transport

        self.crumbs = CrumbManager(self._send)
        self.builder = RequestBuilder(self.crumbs)
        self.mapper = mapper.ResourceMapper(self)
        self._info = _RootInfo(self._fetch_info)

    def _build_url(self, path):
        return str(urljoin(self.server, path))

    def _send(self, call):
        url = self._build_url(call.path)
        logger.debug('%s %s', call.method, url)
        return self.transport.send(call.method, url, call.headers, call.body)

    # Crumbs

    def enable_crumbs(self):
        '''Send anti-CSRF crumbs with every POST request from now on.

        Servers without CSRF protection have no crumb issuer; crumbs are
        left disabled for them and no error is raised.
        '''
        self.crumbs.enable()

    def disable_crumbs(self):
        self.crumbs.disable()

    def are_crumbs_enabled(self):
        return self.crumbs.is_enabled()

    def request_crumb(self):
        ''':returns: crumb issuer answer, ``dict``'''
        return self.crumbs.request()

    def get_crumb_header(self):
        '''Header line sent with POST requests while crumbs are enabled.

        Only meaningful after :meth:`enable_crumbs` succeeded, check
        :meth:`are_crumbs_enabled` first.
        '''
        return self.crumbs.header()

    # Server

    def _fetch_info(self):
        response = self._send(self.builder.info())
        validate_response(
            response,
            'Error during getting list of jobs on %s' % self.server)
        info = mapper.expect_object(
            mapper.decode(response),
            'Could not parse JSON info for server[%s]' % self.server)
        logger.debug('Loaded root metadata of %s', self.server)
        return info

    def get_info(self):
        """Get information on this Master.

        Fetched once per client and cached for its whole life.

        :returns: dictionary with ``jobs``, ``views``, ``numExecutors`` and
            maybe ``primaryView``, ``dict``
        """
        return self._info.get()

    def is_available(self):
        '''Check whether the server is up and answering API calls.

        The server root must answer 200, and the queue must be readable:
        while Jenkins is starting the root answers before the queue does.

        :returns: ``True`` if the server is usable
        '''
        response = self._send(self.builder.info())
        if response.status_code != 200:
            return False
        try:
            self.get_queue()
        except JenkinsException as e:
            logger.debug('Queue not readable yet on %s: %s', self.server, e)
            return False
        return True

    def get_version(self):
        """Get the version of this Master.

        :returns: This master's version number ``str``
        """
        response = self._send(self.builder.version())
        validate_response(
            response, "Error communicating with server[%s]" % self.server)
        return response.headers['X-Jenkins']

    def get_url(self):
        return self.server.rstrip('/')

    def get_url_job(self, job):
        return self._build_url(endpoints.JOB_URL % {'name': job})

    def get_url_view(self, view):
        return self._build_url(endpoints.VIEW_URL % {'name': view})

    def get_url_build(self, job, number):
        if number is None:
            return self.get_url_job(job)
        return self._build_url(
            endpoints.BUILD_URL % {'name': job, 'number': int(number)})

    def execute(self, uri):
        '''Return the content of a page below the server URL.

        Useful for plugins providing their own API
        (e.g. ``cloud/ec2-us-east-1/provision``).

        :param uri: path relative to the server URL, ``str``
        :returns: response body, ``str``
        '''
        call = self.builder.raw(uri)
        response = self._send(call)
        validate_response(
            response, 'Error calling "%s"' % self._build_url(call.path))
        return response.text

    # Jobs

    def get_all_jobs(self):
        '''Names of the jobs listed at the server root.

        :returns: ``{name: {'name': name}}``
        '''
        return dict((job['name'], {'name': job['name']})
                    for job in self.get_info().get('jobs') or [])

    def get_jobs(self):
        '''Fetch every job listed at the server root.

        :returns: ``{name: Job}``; jobs gone in the meantime map to ``None``
        '''
        return dict((name, self.get_job(name)) for name in self.get_all_jobs())

    def get_job(self, name):
        '''Get a job.

        :param name: Job name, ``str``
        :returns: :class:`Job`, or ``None`` if the server does not answer
            with a 2xx status
        :throws: :class:`MalformedResponse` when a 2xx answer is not a JSON
            object
        '''
        response = self._send(self.builder.job_info(name))
        result = mapper.lookup(response)
        if isinstance(result, mapper.Absent):
            return None
        payload = mapper.expect_object(
            result, 'Could not parse JSON info for job[%s]' % name)
        return self.mapper.job(payload, name)

    def delete_job(self, name):
        '''Delete Jenkins job permanently.

        :param name: Name of Jenkins job, ``str``
        '''
        response = self._send(self.builder.delete_job(name))
        validate_response(
            response, 'Error deleting job %s on %s' % (name, self.server))

    def create_job(self, name, config_xml):
        '''Create a new Jenkins job

        :param name: Name of Jenkins job, ``str``
        :param config_xml: config file text, ``str``
        :throws: :class:`JobAlreadyExistsException` when the server refuses
            the name
        '''
        response = self._send(self.builder.create_job(name, config_xml))
        validate_response(response, 'Error creating job %s' % name)
        if response.status_code != 200:
            raise JobAlreadyExistsException('Job %s already exists' % name)

    def get_job_config(self, name):
        '''Get configuration of existing Jenkins job.

        :param name: Name of Jenkins job, ``str``
        :returns: job configuration (XML format)
        '''
        response = self._send(self.builder.get_job_config(name))
        validate_response(
            response, 'Error during getting configuration for job %s' % name)
        return response.text

    def set_job_config(self, name, config_xml):
        '''Change configuration of existing Jenkins job.

        To create a new job, see :meth:`Jenkins.create_job`.

        :param name: Name of Jenkins job, ``str``
        :param config_xml: New XML configuration, ``str``
        '''
        response = self._send(self.builder.set_job_config(name, config_xml))
        validate_response(
            response, 'Error during setting configuration for job %s' % name)

    def retrieve_xml_config_as_string(self, name):
        '''Get configuration of existing Jenkins job.

        .. deprecated:: 0.2.0
           Use :func:`get_job_config` instead.
        '''
        warnings.warn("retrieve_xml_config_as_string() is deprecated, "
                      "use get_job_config()", DeprecationWarning)
        return self.get_job_config(name)

    def set_config_from_element(self, name, element):
        '''Change configuration of a job from an ElementTree element.

        .. deprecated:: 0.2.0
           Use :func:`set_job_config` instead.

        :param name: Name of Jenkins job, ``str``
        :param element: root of the configuration, ``xml.etree.ElementTree.Element``
        '''
        warnings.warn("set_config_from_element() is deprecated, "
                      "use set_job_config()", DeprecationWarning)
        self.set_job_config(name, ET.tostring(element, encoding='unicode'))

    def launch_job(self, name, parameters=None):
        '''Trigger build job.

        Without parameters the job's ``build`` endpoint is used, with at
        least one parameter ``buildWithParameters``.

        :param name: name of job
        :param parameters: parameters for job, or ``None``, ``dict``
        :returns: ``int`` queue item number when the server tells it,
            otherwise ``None``
        '''
        call = self.builder.launch_job(name, parameters)
        response = self._send(call)
        validate_response(
            response, 'Error trying to launch job "%s" (%s)'
            % (name, self._build_url(call.path)))

        location = (response.headers or {}).get('Location')
        if not location:
            return None
        # location is a queue item, eg. "http://jenkins/queue/item/25/"
        try:
            return int(location.rstrip('/').split('/')[-1])
        except ValueError:
            return None

    # Builds

    def get_build(self, job, number, tree=DEFAULT_BUILD_TREE):
        '''Get a build of a job.

        :param job: Job name, ``str``
        :param number: Build number, ``int``
        :param tree: fields to fetch, ``None`` fetches the whole build,
            ``str``
        :returns: :class:`Build`, or ``None`` when the answer is not a JSON
            object
        '''
        number = int(number)
        response = self._send(self.builder.build_info(job, number, tree))
        validate_response(
            response, 'Error during getting information for build %s#%d on %s'
            % (job, number, self.server))
        result = mapper.decode(response)
        if not result.found:
            logger.debug('No build %s#%d: %r', job, number, result)
            return None
        return self.mapper.build(result.payload, job, number)

    def get_console_text_build(self, job, number):
        '''Get build console text.

        :param job: Job name, ``str``
        :param number: Build number, ``int``
        :returns: Build console output,  ``str``
        '''
        response = self._send(self.builder.console_text(job, number))
        validate_response(
            response, 'Error during getting console text for job %s' % job)
        return response.text

    def get_test_report(self, job, number):
        '''Get test results report.

        :param job: Job name, ``str``
        :param number: Build number, ``int``
        :returns: :class:`TestReport`
        '''
        number = int(number)
        response = self._send(self.builder.test_report(job, number))
        validate_response(
            response, 'Error during getting information for build %s#%d on %s'
            % (job, number, self.server))
        payload = mapper.expect_object(
            mapper.decode(response),
            'Could not parse JSON test report for job[%s] number[%d]'
            % (job, number))
        return self.mapper.test_report(payload, job, number)

    # Queue

    def get_queue(self):
        ''':returns: the build queue, :class:`Queue`'''
        response = self._send(self.builder.queue())
        validate_response(
            response,
            'Error during getting information for queue on %s' % self.server)
        payload = mapper.expect_object(
            mapper.decode(response),
            'Could not parse JSON info for queue on %s' % self.server)
        return self.mapper.queue(payload)

    def cancel_queue(self, queue):
        '''Cancel a queued build.

        :param queue: queued item or its id, :class:`JobQueue` or ``int``
        '''
        id = getattr(queue, 'id', queue)
        response = self._send(self.builder.cancel_queue(id))
        validate_response(response, 'Error during stopping job queue #%s' % id)

    # Views

    def get_view(self, name):
        '''Get a view.

        :param name: View name, ``str``
        :returns: :class:`View`
        '''
        response = self._send(self.builder.view_info(name))
        validate_response(
            response, 'Error during getting information for view %s on %s'
            % (name, self.server))
        payload = mapper.expect_object(
            mapper.decode(response),
            'Could not parse JSON info for view[%s]' % name)
        return self.mapper.view(payload)

    def get_views(self):
        ''':returns: every view listed at the server root, ``[View]``'''
        return [self.get_view(view['name'])
                for view in self.get_info().get('views') or []]

    def get_primary_view(self):
        ''':returns: the primary view, :class:`View` or ``None``'''
        info = self.get_info()
        if not info.get('primaryView'):
            return None
        return self.get_view(info['primaryView']['name'])

    # Computers

    def get_computer(self, name):
        '''Get a computer (node).

        :param name: Computer display name, ``str``
        :returns: :class:`Computer`, or ``None`` if the server does not
            answer with a 2xx status
        :throws: :class:`MalformedResponse` when a 2xx answer is not a JSON
            object
        '''
        response = self._send(self.builder.computer_info(name))
        result = mapper.lookup(response)
        if isinstance(result, mapper.Absent):
            return None
        payload = mapper.expect_object(
            result, 'Could not parse JSON info for node[%s]' % name)
        return self.mapper.computer(payload)

    def get_computers(self):
        ''':returns: every computer known to the server, ``[Computer]``'''
        response = self._send(self.builder.computers())
        validate_response(
            response, 'Error during getting list of computers on %s'
            % self.server)
        payload = mapper.expect_object(
            mapper.decode(response),
            'Could not parse JSON info for server[%s]' % self.server)

        computers = []
        for computer in payload.get('computer') or []:
            found = self.get_computer(computer['displayName'])
            if found is not None:
                computers.append(found)
        return computers

    def get_computer_configuration(self, name):
        '''Get the configuration for a computer.

        :param name: Jenkins node name, ``str``
        :returns: node configuration (XML format)
        '''
        response = self._send(self.builder.computer_config(name))
        validate_response(
            response, 'Error during getting configuration for computer %s'
            % name)
        return response.text

    def toggle_offline_computer(self, name):
        response = self._send(self.builder.toggle_offline(name))
        validate_response(response, 'Error marking %s offline' % name)

    def delete_computer(self, name):
        response = self._send(self.builder.delete_computer(name))
        validate_response(response, 'Error deleting %s' % name)

    # Executors

    def get_executor(self, computer, number):
        '''Get one executor of a computer.

        :param computer: Computer display name, ``str``
        :param number: executor slot, ``int``
        :returns: :class:`Executor`
        '''
        response = self._send(self.builder.executor_info(computer, number))
        validate_response(
            response,
            'Error during getting information for executors[%s@%s] on %s'
            % (number, computer, self.server))
        payload = mapper.expect_object(
            mapper.decode(response),
            'Could not parse JSON info for executors[%s@%s]'
            % (number, computer))
        return self.mapper.executor(payload, computer, number)

    def get_executors(self, computer='(master)'):
        '''Get the executors of a computer.

        The number of slots queried is the server root's ``numExecutors``.

        :param computer: Computer display name, ``str``
        :returns: ``[Executor]``
        '''
        num_executors = self.get_info().get('numExecutors') or 0
        return [self.get_executor(computer, number)
                for number in range(num_executors)]

    def stop_executor(self, executor):
        ''':param executor: executor to stop, :class:`Executor`'''
        response = self._send(
            self.builder.stop_executor(executor.computer, executor.number))
        validate_response(
            response, 'Error during stopping executor #%s' % executor.number)
