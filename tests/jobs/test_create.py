import jenkinsfacade
from tests.helper import build_response
from tests.jobs.base import JenkinsJobsTestBase


class JenkinsCreateJobTest(JenkinsJobsTestBase):

    def test_simple(self):
        self.send.return_value = build_response(200, text='')

        self.j.create_job(u'TestJob', self.config_xml)

        method, url, headers, body = self.send.call_args[0]
        self.assertEqual(method, 'POST')
        self.assertEqual(url, self.make_url('createItem?name=TestJob'))
        self.assertEqual(headers, ['Content-Type: text/xml'])
        self.assertEqual(body, self.config_xml.encode('utf-8'))

    def test_already_exists(self):
        self.send.return_value = build_response(
            302, headers={'Location': self.make_url('job/TestJob/')})

        with self.assertRaises(jenkinsfacade.JobAlreadyExistsException) as context_manager:
            self.j.create_job(u'TestJob', self.config_xml)
        self.assertEqual(str(context_manager.exception),
                         'Job TestJob already exists')

    def test_failed(self):
        self.send.return_value = build_response(400, text='A job already exists')

        with self.assertRaises(jenkinsfacade.RequestFailed) as context_manager:
            self.j.create_job(u'TestJob', self.config_xml)
        self.assertEqual(str(context_manager.exception),
                         'Error creating job TestJob')
        self.assertNotIsInstance(context_manager.exception,
                                 jenkinsfacade.JobAlreadyExistsException)
