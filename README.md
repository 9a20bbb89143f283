# shottower

Building blocks for a service that renders video, images and audio from a
JSON description of an edit: data models with validation, API response
models, a small route table, and webhook callbacks for finished renders.
The package has no third-party dependencies.

## Modules

- `shottower.schema`: `RequiredError` (a required field holds its empty or
  zero value) and `EnumError` (a value outside its allowed set or range),
  both subclasses of `ValueError`; the helpers `is_zero_value` and
  `check_required`; and `ProbeResponse`.
- `shottower.geometry`: `Offset` (x and y within -1..1), `Size` (even width
  and height between 2 and 4096) and `Range` (non-negative start and length).
- `shottower.transforms`: `RotateTransformation` (angle within -360..360),
  `SkewTransformation` (x and y within 0..3) and `Transition` (in and out
  names from a fixed set, such as `fade`, `wipeLeft` or `zoom`).
- `shottower.title`: `TitleAsset` and `Soundtrack` (effect `fadeIn`,
  `fadeOut` or `fadeInFadeOut`, volume within 0..1).
- `shottower.subtitle`: `Subtitle` (a non-negative stream index).
- `shottower.output`: `Output`, `Poster` and `Thumbnail`. `Output` checks
  format, resolution, aspect ratio, frame rate, scale and quality against
  their allowed values, and then validates its size, range, poster and
  thumbnail.
- `shottower.destinations`: `MuxDestination`, `MuxDestinationOptions`,
  `ShotstackDestination` and `parse_destination`, which picks the class from
  the `provider` key (`mux` or `shotstack`) and raises `ValueError` for any
  other provider.
- `shottower.responses`: `RenderStatus` (an `IntEnum` whose `label` is the
  name reported by the API, such as `"queue"` or `"done"`),
  `QueuedResponse`, `QueuedResponseData`, `TemplateResponse` and
  `TemplateResponseData`.
- `shottower.templates`: `TemplateDataResponse`, `TemplateDataResponseData`,
  `TemplateListResponse`, `TemplateListResponseData` and
  `TemplateListResponseItem`.
- `shottower.routing`: `Route`, `RouteTable`, `new_router`,
  `encode_json_response`, `parse_bool_parameter` and `write_temp_file`.
- `shottower.callbacks`: `CallbackResponse`, `build_callback_response`,
  `CallbackSender` and `gifski_parameters`.

Models are dataclasses. Those read from JSON have a `from_dict` class method,
and `Output` also has `from_json`. Every model has `validate()`, which raises
`RequiredError` or `EnumError` on the first problem it finds, and `to_dict()`
for serialisation.

## Examples

Validating output settings:

```python
from shottower.output import Output
from shottower.schema import EnumError

output = Output.from_dict({"format": "mp4", "resolution": "hd"})
output.validate()
print(output.fps, output.quality, output.aspect_ratio)   # 25.0 medium 16:9

try:
    Output.from_dict({"format": "avi"}).validate()
except EnumError as err:
    print(err.schema, err.field, err.value)              # Output Format avi
```

Routing requests:

```python
from shottower.routing import Route, new_router, encode_json_response

class StatusAPI:
    def routes(self):
        return [Route("GetRender", "GET", "/stage/render/{id}", lambda **kw: kw)]

table = new_router(StatusAPI())
route, variables = table.match("GET", "/stage/render/abc/")
print(route.name, variables)                 # GetRender {'id': 'abc'}

status, headers, body = encode_json_response({"success": True}, 201)
```

Routes match on method and path, treat a trailing slash as optional, and the
first matching route wins. `encode_json_response` returns the status (200 when
none is given), a JSON content-type header and the encoded body.

Sending a render callback:

```python
from datetime import datetime
from shottower.callbacks import CallbackSender

sender = CallbackSender("http://localhost:4000")
sender.execute("render-id", "http://localhost:8080/hook", datetime.now())
```

`execute` posts a JSON body (`type`, `action`, `id`, `owner`, `status`, and
either `url` and `completed` or `error`) and returns the HTTP status received,
or `None` when there is no callback URL or the request timed out. When the
status is missing or outside 200–399, a retry is scheduled after the next
delay in `RETRY_DELAYS` (0, 8, 27, 64, 125, 216, 343, 512, 729, 900 seconds).
The `post` and `scheduler` arguments of `CallbackSender` replace the HTTP
request and the timer, which is useful in tests.

`gifski_parameters(output_name, repeat, render_id, directory)` lists the
frame files of a render in a directory (the temporary directory by default)
and returns the gifski arguments; it raises `FileNotFoundError` when no frame
is found.

## What the package does not do

It does not run an HTTP server, keep a render queue, download assets, or
invoke ffmpeg or gifski. There are no models for edits, timelines, tracks,
clips, or image, video, audio, HTML or luma assets. The route table only
matches requests to handlers you supply.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```