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
.. module:: jenkinsfacade.models
    :platform: Unix, Windows
    :synopsis: Read-only views over Jenkins API payloads

Each object wraps the decoded JSON of one response. The client passed in
is only kept as a weak reference: objects can issue follow-up calls
through it but never keep it alive.
'''

import time
import weakref

# Build results
RUNNING = 'RUNNING'
SUCCESS = 'SUCCESS'
FAILURE = 'FAILURE'
UNSTABLE = 'UNSTABLE'
ABORTED = 'ABORTED'

# Test case statuses
FAILING_STATUSES = ('FAILED', 'REGRESSION')


def weak_client(jenkins):
    '''Weak proxy to ``jenkins``, which is returned as is if already one.'''
    if jenkins is None or isinstance(jenkins, weakref.ProxyTypes):
        return jenkins
    return weakref.proxy(jenkins)


def _parameters_from_actions(actions):
    parameters = {}
    for action in actions or []:
        if not isinstance(action, dict):
            continue
        for parameter in action.get('parameters') or []:
            if 'name' in parameter:
                parameters[parameter['name']] = parameter.get('value')
    return parameters


class JenkinsObject(object):

    def __init__(self, data, jenkins):
        self._data = data
        self._jenkins = weak_client(jenkins)

    @property
    def data(self):
        '''Decoded JSON payload the object was built from, ``dict``'''
        return self._data

    def get(self, key, default=None):
        return self._data.get(key, default)

    @property
    def url(self):
        return self._data.get('url')


class Job(JenkinsObject):

    def __init__(self, data, jenkins, name=None):
        super(Job, self).__init__(data, jenkins)
        self.name = data.get('name', name)

    def __repr__(self):
        return '<Job %s>' % self.name

    @property
    def color(self):
        return self._data.get('color')

    @property
    def description(self):
        return self._data.get('description')

    @property
    def buildable(self):
        return self._data.get('buildable', False)

    @property
    def next_build_number(self):
        return self._data.get('nextBuildNumber')

    def _build_number(self, key):
        build = self._data.get(key)
        if not build:
            return None
        return build.get('number')

    def get_parameters_definition(self):
        '''Parameters the job accepts when launched.

        :returns: ``{name: {'default': ..., 'choices': [...],
                  'description': str}}``
        '''
        definitions = {}
        containers = (self._data.get('actions') or []) + \
            (self._data.get('property') or [])
        for container in containers:
            if not isinstance(container, dict):
                continue
            for definition in container.get('parameterDefinitions') or []:
                default = definition.get('defaultParameterValue') or {}
                definitions[definition['name']] = {
                    'default': default.get('value'),
                    'choices': definition.get('choices'),
                    'description': definition.get('description'),
                }
        return definitions

    def get_builds(self):
        '''Fetch every build listed in the job payload.

        :returns: list of builds, ``[Build]``
        '''
        builds = []
        for build in self._data.get('builds') or []:
            found = self._jenkins.get_build(self.name, build['number'])
            if found is not None:
                builds.append(found)
        return builds

    def get_build(self, number):
        return self._jenkins.get_build(self.name, number)

    def get_last_build(self):
        number = self._build_number('lastBuild')
        if number is None:
            return None
        return self._jenkins.get_build(self.name, number)

    def get_last_successful_build(self):
        number = self._build_number('lastSuccessfulBuild')
        if number is None:
            return None
        return self._jenkins.get_build(self.name, number)

    def get_last_completed_build(self):
        number = self._build_number('lastCompletedBuild')
        if number is None:
            return None
        return self._jenkins.get_build(self.name, number)

    def is_currently_building(self):
        last_build = self.get_last_build()
        return last_build is not None and last_build.is_running()

    def get_config(self):
        return self._jenkins.get_job_config(self.name)

    def launch(self, parameters=None):
        return self._jenkins.launch_job(self.name, parameters)

    def delete(self):
        self._jenkins.delete_job(self.name)


class Build(JenkinsObject):
    '''One historical (or running) build of a job.

    Durations and timestamps are reported by Jenkins in milliseconds and
    are exposed unchanged.
    '''

    def __init__(self, data, job_name, jenkins, number=None):
        super(Build, self).__init__(data, jenkins)
        self.job_name = job_name
        self.number = data.get('number', number)

    def __repr__(self):
        return '<Build %s#%s>' % (self.job_name, self.number)

    @property
    def result(self):
        '''Build result, ``RUNNING`` while the build has none yet.'''
        return self._data.get('result') or RUNNING

    @property
    def duration(self):
        return self._data.get('duration')

    @property
    def timestamp(self):
        return self._data.get('timestamp')

    @property
    def estimated_duration(self):
        return self._data.get('estimatedDuration')

    @property
    def built_on(self):
        return self._data.get('builtOn')

    @property
    def parameters(self):
        return _parameters_from_actions(self._data.get('actions'))

    def is_running(self):
        return self.result == RUNNING

    def get_progress(self, now=None):
        '''Estimated completion percentage of a running build.

        :param now: current time in seconds since the epoch, ``float``
        :returns: percentage in [0, 100], ``float``, or ``None`` when the
                  build is over or nothing is known about its duration
        '''
        if not self.is_running():
            return None
        if not self.estimated_duration or self.estimated_duration <= 0 \
                or self.timestamp is None:
            return None
        if now is None:
            now = time.time()
        elapsed = now * 1000 - self.timestamp
        return max(0.0, min(100.0, elapsed * 100.0 / self.estimated_duration))

    def get_remaining_execution_time(self, now=None):
        '''Estimated seconds left for a running build, ``None`` if unknown.'''
        if not self.is_running():
            return None
        if not self.estimated_duration or self.estimated_duration <= 0 \
                or self.timestamp is None:
            return None
        if now is None:
            now = time.time()
        end = (self.timestamp + self.estimated_duration) / 1000.0
        return max(0.0, end - now)

    def get_console_text(self):
        return self._jenkins.get_console_text_build(self.job_name, self.number)

    def get_test_report(self):
        return self._jenkins.get_test_report(self.job_name, self.number)


class Queue(JenkinsObject):

    def get_job_queues(self):
        ''':returns: queued items, ``[JobQueue]``'''
        return [JobQueue(item, self._jenkins)
                for item in self._data.get('items') or []]

    def __len__(self):
        return len(self._data.get('items') or [])


class JobQueue(JenkinsObject):
    '''A build request waiting in the queue for an executor.'''

    @property
    def id(self):
        return self._data.get('id')

    @property
    def job_name(self):
        return (self._data.get('task') or {}).get('name')

    @property
    def why(self):
        return self._data.get('why')

    @property
    def blocked(self):
        return self._data.get('blocked', False)

    @property
    def buildable(self):
        return self._data.get('buildable', False)

    @property
    def stuck(self):
        return self._data.get('stuck', False)

    @property
    def parameters(self):
        parameters = _parameters_from_actions(self._data.get('actions'))
        if parameters:
            return parameters
        # older servers only send "\nkey=value\nkey2=value2"
        for line in (self._data.get('params') or '').split('\n'):
            if '=' in line:
                key, value = line.split('=', 1)
                parameters[key] = value
        return parameters

    def cancel(self):
        self._jenkins.cancel_queue(self)


class View(JenkinsObject):

    @property
    def name(self):
        return self._data.get('name')

    @property
    def description(self):
        return self._data.get('description')

    @property
    def job_names(self):
        return [job['name'] for job in self._data.get('jobs') or []]

    def get_jobs(self):
        jobs = []
        for name in self.job_names:
            job = self._jenkins.get_job(name)
            if job is not None:
                jobs.append(job)
        return jobs

    def get_color(self):
        '''Worst color among the jobs of the view.

        :returns: ``'red'``, ``'yellow'`` or ``'blue'``
        '''
        color = 'blue'
        for job in self._data.get('jobs') or []:
            job_color = job.get('color') or ''
            if job_color.startswith('red'):
                return 'red'
            if job_color.startswith('yellow'):
                color = 'yellow'
        return color

    def __repr__(self):
        return '<View %s>' % self.name


class Computer(JenkinsObject):

    @property
    def name(self):
        return self._data.get('displayName')

    @property
    def offline(self):
        return self._data.get('offline', False)

    @property
    def offline_cause(self):
        reason = self._data.get('offlineCauseReason')
        if reason:
            return reason
        cause = self._data.get('offlineCause')
        if isinstance(cause, dict):
            return cause.get('description')
        return cause

    @property
    def num_executors(self):
        return self._data.get('numExecutors', 0)

    @property
    def idle(self):
        return self._data.get('idle', False)

    def get_executors(self):
        return [self._jenkins.get_executor(self.name, number)
                for number in range(self.num_executors)]

    def toggle_offline(self):
        self._jenkins.toggle_offline_computer(self.name)

    def delete(self):
        self._jenkins.delete_computer(self.name)

    def get_configuration(self):
        return self._jenkins.get_computer_configuration(self.name)

    def __repr__(self):
        return '<Computer %s>' % self.name


class Executor(JenkinsObject):

    def __init__(self, data, computer, jenkins, number=None):
        super(Executor, self).__init__(data, jenkins)
        self.computer = computer
        self.number = data.get('number', number)

    @property
    def progress(self):
        return self._data.get('progress')

    @property
    def idle(self):
        return self._data.get('idle', False)

    @property
    def build_number(self):
        executable = self._data.get('currentExecutable') or {}
        return executable.get('number')

    @property
    def build_url(self):
        executable = self._data.get('currentExecutable') or {}
        return executable.get('url')

    def stop(self):
        self._jenkins.stop_executor(self)

    def __repr__(self):
        return '<Executor %s@%s>' % (self.number, self.computer)


class TestReport(JenkinsObject):
    '''Aggregated test results of a single build.'''

    def __init__(self, data, job_name, build_id, jenkins):
        super(TestReport, self).__init__(data, jenkins)
        self.job_name = job_name
        self.build_id = build_id

    @property
    def duration(self):
        return self._data.get('duration')

    @property
    def fail_count(self):
        return self._data.get('failCount', 0)

    @property
    def pass_count(self):
        return self._data.get('passCount', 0)

    @property
    def skip_count(self):
        return self._data.get('skipCount', 0)

    @property
    def suites(self):
        return self._data.get('suites') or []

    def get_suite(self, index):
        return self.suites[index]

    def get_suite_cases(self, index):
        return self.get_suite(index).get('cases') or []

    def get_suite_status(self, index):
        for case in self.get_suite_cases(index):
            if case.get('status') in FAILING_STATUSES:
                return 'FAILED'
        return 'PASSED'

    def get_failing_cases(self):
        return [case
                for suite in self.suites
                for case in suite.get('cases') or []
                if case.get('status') in FAILING_STATUSES]
