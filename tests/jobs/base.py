from tests.base import JenkinsTestBase


class JenkinsJobsTestBase(JenkinsTestBase):

    config_xml = """
        <matrix-project>
            <actions/>
            <description>Foo</description>
        </matrix-project>"""

    job_info = {
        u'name': u'TestJob',
        u'color': u'blue',
        u'url': u'http://example.com/job/TestJob/',
        u'description': u'Foo',
        u'buildable': True,
        u'nextBuildNumber': 4,
        u'builds': [
            {u'number': 3, u'url': u'http://example.com/job/TestJob/3/'},
            {u'number': 2, u'url': u'http://example.com/job/TestJob/2/'},
        ],
        u'lastBuild': {u'number': 3},
        u'lastSuccessfulBuild': {u'number': 2},
        u'lastCompletedBuild': {u'number': 2},
        u'property': [{
            u'parameterDefinitions': [{
                u'name': u'BRANCH',
                u'description': u'branch to build',
                u'defaultParameterValue': {u'value': u'master'},
            }, {
                u'name': u'FLAVOR',
                u'description': None,
                u'choices': [u'debug', u'release'],
                u'defaultParameterValue': {u'value': u'debug'},
            }],
        }],
    }


class JenkinsGetJobsTestBase(JenkinsJobsTestBase):

    root_info = {
        u'jobs': [
            {u'name': u'my_job1', u'color': u'blue', u'url': u'http://...'},
            {u'name': u'my_job2', u'color': u'red', u'url': u'http://...'},
        ],
        u'views': [{u'name': u'All'}],
        u'numExecutors': 2,
    }
