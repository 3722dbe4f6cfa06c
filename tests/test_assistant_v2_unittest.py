import inspect
import unittest
from unittest.mock import AsyncMock

from assistant_v2.core.authenticators import NoAuthAuthenticator
from assistant_v2.exceptions import MissingRequiredParameter
from assistant_v2.schemas import DetailedResponse, RequestDescriptor
from assistant_v2.service import AssistantV2


SERVICE_URL = 'https://gateway.watsonplatform.net/assistant/api/assistant/api'
VERSION = '2018-10-18'


class AssistantV2TestCase(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self.service = AssistantV2(version=VERSION, authenticator=NoAuthAuthenticator(), service_url=SERVICE_URL)
        # don't actually send a request
        self.create_request = AsyncMock(return_value=DetailedResponse(status_code=200, result={}))
        self.service.create_request = self.create_request

    def options(self) -> RequestDescriptor:
        self.create_request.assert_awaited_once()
        return self.create_request.await_args.args[0]

    def assert_url_and_method(self, descriptor: RequestDescriptor, path: str, method: str) -> None:
        self.assertEqual(descriptor.path, path)
        self.assertEqual(descriptor.method, method)
        self.assertEqual(descriptor.query, {'version': VERSION})

    def assert_media_headers(self, descriptor: RequestDescriptor, accept, content_type) -> None:
        self.assertEqual(descriptor.headers.get('Accept'), accept)
        self.assertEqual(descriptor.headers.get('Content-Type'), content_type)

    async def assert_rejects_missing(self, pending) -> None:
        # the coroutine is created without raising; the error comes out of await
        self.assertTrue(inspect.isawaitable(pending))
        with self.assertRaisesRegex(MissingRequiredParameter, 'Missing required parameters'):
            await pending
        self.create_request.assert_not_called()


class TestCreateSession(AssistantV2TestCase):
    async def test_passes_the_right_params_to_create_request(self) -> None:
        result = self.service.create_session(assistant_id='fake_assistantId')
        self.assertTrue(inspect.isawaitable(result))
        response = await result

        descriptor = self.options()
        self.assertEqual(response.status_code, 200)
        self.assert_url_and_method(descriptor, '/v2/assistants/{assistant_id}/sessions', 'POST')
        self.assert_media_headers(descriptor, 'application/json', None)
        self.assertEqual(descriptor.path_params['assistant_id'], 'fake_assistantId')
        self.assertEqual(descriptor.render_path(), '/v2/assistants/fake_assistantId/sessions')
        self.assertIsNone(descriptor.body)

    async def test_prioritizes_user_given_headers(self) -> None:
        await self.service.create_session(
            assistant_id='fake_assistantId',
            headers={'Accept': 'fake/header', 'Content-Type': 'fake/header'},
        )
        self.assert_media_headers(self.options(), 'fake/header', 'fake/header')

    async def test_enforces_required_parameters(self) -> None:
        await self.assert_rejects_missing(self.service.create_session())

    async def test_rejects_explicit_none(self) -> None:
        await self.assert_rejects_missing(self.service.create_session(assistant_id=None))


class TestDeleteSession(AssistantV2TestCase):
    async def test_passes_the_right_params_to_create_request(self) -> None:
        await self.service.delete_session(assistant_id='fake_assistantId', session_id='fake_sessionId')

        descriptor = self.options()
        self.assert_url_and_method(descriptor, '/v2/assistants/{assistant_id}/sessions/{session_id}', 'DELETE')
        self.assert_media_headers(descriptor, 'application/json', None)
        self.assertEqual(descriptor.path_params['assistant_id'], 'fake_assistantId')
        self.assertEqual(descriptor.path_params['session_id'], 'fake_sessionId')

    async def test_prioritizes_user_given_headers(self) -> None:
        await self.service.delete_session(
            assistant_id='fake_assistantId',
            session_id='fake_sessionId',
            headers={'Accept': 'fake/header', 'Content-Type': 'fake/header'},
        )
        self.assert_media_headers(self.options(), 'fake/header', 'fake/header')

    async def test_enforces_required_parameters(self) -> None:
        await self.assert_rejects_missing(self.service.delete_session())

    async def test_reports_every_missing_name(self) -> None:
        with self.assertRaises(MissingRequiredParameter) as ctx:
            await self.service.delete_session()
        self.assertEqual(str(ctx.exception), 'Missing required parameters: assistant_id, session_id')

    async def test_rejects_partial_params(self) -> None:
        await self.assert_rejects_missing(self.service.delete_session(assistant_id='fake_assistantId'))


class TestMessage(AssistantV2TestCase):
    async def test_passes_the_right_params_to_create_request(self) -> None:
        await self.service.message(
            assistant_id='fake_assistantId',
            session_id='fake_sessionId',
            input='fake_input',
            context='fake_context',
        )

        descriptor = self.options()
        self.assert_url_and_method(
            descriptor,
            '/v2/assistants/{assistant_id}/sessions/{session_id}/message',
            'POST',
        )
        self.assert_media_headers(descriptor, 'application/json', 'application/json')
        self.assertEqual(descriptor.body['input'], 'fake_input')
        self.assertEqual(descriptor.body['context'], 'fake_context')
        self.assertEqual(descriptor.path_params['assistant_id'], 'fake_assistantId')
        self.assertEqual(descriptor.path_params['session_id'], 'fake_sessionId')

    async def test_prioritizes_user_given_headers(self) -> None:
        await self.service.message(
            assistant_id='fake_assistantId',
            session_id='fake_sessionId',
            headers={'Accept': 'fake/header', 'Content-Type': 'fake/header'},
        )
        self.assert_media_headers(self.options(), 'fake/header', 'fake/header')

    async def test_enforces_required_parameters(self) -> None:
        await self.assert_rejects_missing(self.service.message())

    async def test_rejects_missing_session_even_with_payload(self) -> None:
        await self.assert_rejects_missing(self.service.message(assistant_id='a', input={'text': 'hi'}))


class TestServiceConfiguration(unittest.TestCase):
    def test_version_is_required(self) -> None:
        with self.assertRaisesRegex(ValueError, 'version was not specified'):
            AssistantV2(version='', authenticator=NoAuthAuthenticator())

    def test_authenticator_is_required(self) -> None:
        with self.assertRaisesRegex(ValueError, 'authenticator must be set'):
            AssistantV2(version=VERSION, authenticator=None)

    def test_default_service_url(self) -> None:
        service = AssistantV2(version=VERSION, authenticator=NoAuthAuthenticator())
        self.assertEqual(service.service_url, AssistantV2.DEFAULT_SERVICE_URL)
        service.set_service_url('https://api.example.test/assistant')
        self.assertEqual(service.service_url, 'https://api.example.test/assistant')
        with self.assertRaises(ValueError):
            service.set_service_url('')


class TestDefaultHeaders(AssistantV2TestCase):
    async def test_default_headers_reach_every_request(self) -> None:
        self.service.set_default_headers({'X-Watson-Learning-Opt-Out': 'true'})
        await self.service.create_session(assistant_id='fake_assistantId')
        self.assertEqual(self.options().headers['X-Watson-Learning-Opt-Out'], 'true')


if __name__ == '__main__':
    unittest.main()
