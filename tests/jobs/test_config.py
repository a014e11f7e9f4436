import xml.etree.ElementTree as ET

import jenkinsfacade
from tests.helper import build_response
from tests.jobs.base import JenkinsJobsTestBase


class JenkinsGetJobConfigTest(JenkinsJobsTestBase):

    def test_simple(self):
        self.send.return_value = build_response(200, text=self.config_xml)

        self.assertEqual(self.j.get_job_config(u'TestJob'), self.config_xml)
        self.assertEqual(self.got_requests(), [
            ('GET', self.make_url('job/TestJob/config.xml'), [], None)])

    def test_failed(self):
        self.send.return_value = build_response(404, text='Not Found')

        with self.assertRaises(jenkinsfacade.RequestFailed) as context_manager:
            self.j.get_job_config(u'TestJob')
        self.assertEqual(str(context_manager.exception),
                         'Error during getting configuration for job TestJob')

    def test_deprecated_wrapper(self):
        self.send.return_value = build_response(200, text=self.config_xml)

        with self.assertWarns(DeprecationWarning):
            config = self.j.retrieve_xml_config_as_string(u'TestJob')
        self.assertEqual(config, self.config_xml)


class JenkinsSetJobConfigTest(JenkinsJobsTestBase):

    def test_simple(self):
        self.send.return_value = build_response(200, text='')

        self.j.set_job_config(u'TestJob', self.config_xml)

        method, url, headers, body = self.send.call_args[0]
        self.assertEqual(method, 'POST')
        self.assertEqual(url, self.make_url('job/TestJob/config.xml'))
        self.assertEqual(headers, ['Content-Type: text/xml'])
        self.assertEqual(body, self.config_xml.encode('utf-8'))

    def test_failed(self):
        self.send.return_value = build_response(500, text='Oops')

        with self.assertRaises(jenkinsfacade.RequestFailed) as context_manager:
            self.j.set_job_config(u'TestJob', self.config_xml)
        self.assertEqual(str(context_manager.exception),
                         'Error during setting configuration for job TestJob')

    def test_from_element(self):
        self.send.return_value = build_response(200, text='')
        element = ET.fromstring('<project><description>Foo</description></project>')

        with self.assertWarns(DeprecationWarning):
            self.j.set_config_from_element(u'TestJob', element)

        self.assertEqual(
            self.send.call_args[0][3],
            b'<project><description>Foo</description></project>')
