import jenkinsfacade
from tests.base import JenkinsTestBase
from tests.helper import build_response


class JenkinsQueueTestBase(JenkinsTestBase):

    queue_info = {
        u'items': [{
            u'id': 25,
            u'task': {u'name': u'TestJob', u'url': u'http://example.com/job/TestJob/'},
            u'why': u'Waiting for next available executor',
            u'blocked': False,
            u'buildable': True,
            u'stuck': False,
            u'actions': [{u'parameters': [{u'name': u'BRANCH', u'value': u'master'}]}],
        }, {
            u'id': 26,
            u'task': {u'name': u'OtherJob'},
            u'why': u'Build #3 is already in progress',
            u'blocked': True,
            u'buildable': False,
            u'params': u'\nBRANCH=stable\nFLAVOR=debug=1',
        }],
    }


class JenkinsGetQueueTest(JenkinsQueueTestBase):

    def test_simple(self):
        self.send.return_value = build_response(200, self.queue_info)

        queue = self.j.get_queue()

        self.assertIsInstance(queue, jenkinsfacade.Queue)
        self.assertEqual(len(queue), 2)
        self.assertEqual(self.got_request_urls(), [self.make_url('queue/api/json')])

        first, second = queue.get_job_queues()
        self.assertEqual(first.id, 25)
        self.assertEqual(first.job_name, u'TestJob')
        self.assertEqual(first.why, u'Waiting for next available executor')
        self.assertTrue(first.buildable)
        self.assertFalse(first.blocked)
        self.assertFalse(first.stuck)
        self.assertEqual(first.parameters, {u'BRANCH': u'master'})
        self.assertEqual(second.job_name, u'OtherJob')
        self.assertTrue(second.blocked)
        self.assertEqual(second.parameters,
                         {u'BRANCH': u'stable', u'FLAVOR': u'debug=1'})

    def test_empty(self):
        self.send.return_value = build_response(200, {u'items': []})

        queue = self.j.get_queue()

        self.assertEqual(len(queue), 0)
        self.assertEqual(queue.get_job_queues(), [])

    def test_failed(self):
        self.send.return_value = build_response(503, text='Unavailable')

        with self.assertRaises(jenkinsfacade.RequestFailed) as context_manager:
            self.j.get_queue()
        self.assertEqual(
            str(context_manager.exception),
            'Error during getting information for queue on {0}/'
            .format(self.base_url))

    def test_malformed(self):
        self.send.return_value = build_response(200, text='Invalid JSON')

        with self.assertRaises(jenkinsfacade.MalformedResponse):
            self.j.get_queue()


class JenkinsCancelQueueTest(JenkinsQueueTestBase):

    def test_by_id(self):
        self.send.return_value = build_response(302, text='')

        self.j.cancel_queue(25)

        self.assertEqual(self.got_requests(), [
            ('POST', self.make_url('queue/item/25/cancelQueue'), [], None)])

    def test_from_item(self):
        self.send.side_effect = [
            build_response(200, self.queue_info),
            build_response(302, text=''),
        ]

        self.j.get_queue().get_job_queues()[1].cancel()

        self.assertEqual(self.send.call_args[0][:2],
                         ('POST', self.make_url('queue/item/26/cancelQueue')))

    def test_failed(self):
        self.send.return_value = build_response(404, text='Not Found')

        with self.assertRaises(jenkinsfacade.RequestFailed) as context_manager:
            self.j.cancel_queue(25)
        self.assertEqual(str(context_manager.exception),
                         'Error during stopping job queue #25')
