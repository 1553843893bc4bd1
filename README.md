# courierclient

A Python client for the Courier notification API. It covers sending
messages, message status, profiles, lists and subscriptions, brands,
audiences, audit events, automations, bulk jobs and notification content.
Requests are made with `requests`; every call blocks until the API answers.

## Installation

```
pip install courierclient
```

## Getting started

Create a client with your auth token. Without a base URL the client talks
to `https://api.courier.com`; pass another one to use a different endpoint.

```python
from courierclient.client import create_client

client = create_client("token")
```

`Client` bundles every endpoint group and holds one
`courierclient.api.APIConfiguration` in its `api` attribute. Every request
carries `Authorization: Bearer <token>`, `Content-Type: application/json`
and a `User-Agent` of `courierclient/2.7.0`.

### Sending a message

```python
request_id = client.send_message_map({
    "message": {
        "template": "my-template",
        "to": {"email": "someone@example.com"},
    }
})
```

`send_message` accepts a `courierclient.send.SendMessageRequestBody` (or any
value that encodes to a JSON object) instead of a mapping.

The event-based form returns the message id:

```python
message_id = client.send_map(
    "event-id",
    "recipient-id",
    {"profile": {"email": "someone@example.com"}, "data": {"foo": "bar"}},
)
```

`send` does the same with a `courierclient.send.SendBody`.

### Idempotent sends

```python
from datetime import datetime, timedelta

from courierclient.send import with_idempotency_key, with_idempotency_key_expiration

request_id = client.send_message_with_options(
    {"message": {"template": "my-template", "to": {"email": "someone@example.com"}}},
    "POST",
    with_idempotency_key("placeholder"),
    with_idempotency_key_expiration(datetime.now() + timedelta(hours=24)),
)
```

The expiration is sent in the `x-idempotency-expiration` header as
milliseconds since the epoch; a naive datetime is taken as local time.

### Reading data back

```python
message = client.get_message("1-23456789")
print(message.status, message.sent)

profile = client.get_profile("recipient-id")   # decoded JSON as a dict
lists = client.get_lists("", "")               # cursor, pattern
brand = client.get_brand("my-brand")
events = client.list_audit_events("")
audiences = client.get_audiences("")
```

List responses carry a `paging` attribute (`courierclient.api.PagingResponse`)
with `cursor` and `more`.

### Lists and subscriptions

```python
from courierclient.lists import ListRecipient, ListSubscriptionBody, PutListBody

client.put_list("my-list", PutListBody(name="Besties"))
client.post_list_subscriptions(
    "my-list", ListSubscriptionBody(recipients=[ListRecipient(recipient_id="recipient-id")])
)
client.list_subscribe("my-list", "my-recipient", {})
client.list_unsubscribe("my-list", "my-recipient")
```

### Audiences

```python
from courierclient.audiences import Audience, SingleFilter

client.put_audience(
    "engineers",
    Audience(name="Engineers", filter=SingleFilter(operator="EQ", path="title", value="Engineer")),
)
```

The filter must be a `SingleFilter` or a `NestedFilter`.

### Automations and bulk jobs

```python
from courierclient.automations import Automation, AutomationInvokeBody, AutomationStep

run_id = client.invoke_automation(
    AutomationInvokeBody(automation=Automation(steps=[AutomationStep(action="send")]))
)

job_id = client.create_job({"message": {"event": "foo"}})
client.ingest_job(job_id, {"users": [{"recipient": "johndoe"}]})
client.run_job(job_id)
```

### Webhooks

`courierclient.messages.WebhookResponse.from_dict` turns a decoded webhook
payload into a `WebhookResponse` whose `data` is a `MessageResponse`.

## Errors

- A missing required identifier raises `ValueError` before any request is made.
- A response outside the 2xx range raises `courierclient.api.HTTPError`,
  which carries `status_code` and `error_message` (the response body).
- `get_audience` and `delete_audience` raise `LookupError`
  ("AudienceId ..., not found") when the request fails.
- `put_audience` raises `TypeError` when the filter is of the wrong type.

```python
from courierclient.api import HTTPError

try:
    client.get_brand("missing")
except HTTPError as err:
    print(err.status_code)
```

## What the package does not do

It is a library only: there is no command-line tool, no server to receive
webhooks, and no retrying or asynchronous requests.

## Running the tests

```
pip install courierclient[test]
pytest
```