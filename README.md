# tunekit

tunekit is a small pure-Python library. It has no runtime dependencies and comes in two parts:

- **HTTP building blocks.** These are an RFC 3986 URI parser, case-insensitive headers, query-string encoding, and a `Request` object that describes a request.
- **Interface helpers.** These are for Material-style user interfaces: inherited themes, corner radii, colour helpers, input blocking, and wheel and keyboard scrolling of a view.

## Installation

```
pip install tunekit
```

## Parsing URIs

`tunekit.uri.parse_uri` (the same as `URI.parse`) matches the text against the RFC 3986 `URI` grammar. It returns a frozen `URI` dataclass:

- The dataclass has the fields `uri`, `scheme`, `authority`, `userinfo`, `host`, `port`, `path`, `query`, `fragment` and `valid`.
- Components that are not present are empty strings.
- `valid` is `False` when no prefix of the text forms a URI.

```python
from tunekit.uri import parse_uri

uri = parse_uri("foo://example.com:8042/over/there?name=ferret#nose")
uri.scheme     # "foo"
uri.authority  # "example.com:8042"
uri.host       # "example.com"
uri.port       # "8042"
uri.path       # "/over/there"
uri.query      # "name=ferret"
uri.fragment   # "nose"
uri.valid      # True
```

## Headers, query strings and messages

`tunekit.types` provides the following:

- **`Header`.** A mutable mapping with case-insensitive names. Iteration is ordered by the case-insensitive name. Assigning a new value keeps the spelling the name was first stored with.
- **`url_encode` / `url_decode`.** `url_encode` percent-encodes everything except unreserved characters. `url_decode` decodes percent-escapes.
- **`UrlParams`.** Query parameters. The first value set for a name wins, and `encode()` writes them sorted by name.
- **`CookieJar`.** Holds raw `Set-Cookie` lines.
- **`Attribute` and `Operation`.** Enums.
- **Session messages.** The message types `Stop` and `ConnectAction`, with `Action` being `ADD`, `CANCEL`, `PAUSE` or `UNPAUSE`.

```python
from tunekit.types import Header, UrlParams, url_decode

params = UrlParams().set_param("q", "a b").set_param("limit", "10")
params.encode()        # "limit=10&q=a%20b"
url_decode("a%20b")    # "a b"

h = Header({"Content-Type": "text/html"})
h["content-type"]      # "text/html"
```

## Requests

`tunekit.request.Request` describes one HTTP request. It holds:

- a URL; the `url` property, with the parsed form in `url_info`;
- case-insensitive `headers`;
- `connect_timeout`, which defaults to 180 seconds;
- `transfer_timeout`, which defaults to 0, meaning no limit;
- `transfer_low_speed`, which defaults to 30 bytes per second;
- the TCP keep-alive settings `tcp_keepalive`, `tcp_keepidle` and `tcp_keepintvl`.

Other methods:

- `set_header` sets one header and returns the request, so calls can be chained.
- `header(name)` returns the value, or an empty string when the header is absent.
- `set_option` replaces all headers at once.
- `copy()` returns an independent copy.

```python
from tunekit.request import Request

req = Request("https://example.com/search").set_header("Accept", "text/html")
req.header("accept")       # "text/html"
req.url_info.host          # "example.com"
```

## What the package does not do

tunekit does not perform network I/O:

- There is no session, connection or response type.
- A `Request` only describes a request, and nothing here sends it.
- Cookie files are neither loaded nor saved.

There is also no timeout watchdog and no type-scale or button-style catalogue.

## Interface helpers

| Module | What it provides |
|---|---|
| `tunekit.theme` | `Theme`: the properties `text_color`, `support_text_color`, `background_color`, `state_layer_color` and `elevation`. Children inherit each of these from their parent until they `set` their own, and `reset` drops an explicit value again. `connect(name, callback)` registers a callback that is called on each change. |
| `tunekit.corner` | `CornersGroup`. `corner()` takes one radius, or a list of 1–4 radii given as top-left, top-right, bottom-left, bottom-right. `corners()` takes four explicit radii. Also the colour helpers `transparent`, `hover_color` (alpha 0.08) and `press_color` (alpha 0.18), and `Tracker` / `TrackKind`, which count creates and deletes. |
| `tunekit.input_block` | `InputBlock` and `InputState`. While `when` is true, the target accepts only the requested mouse buttons, hover and touch. The target's own state is restored afterwards. |
| `tunekit.wheel_event` | `Flickable` (the scrollable view's geometry), `ScrollBar`, `WheelEvent`, the `Modifier` and `Key` codes, and `fuzzy_less_than_or_equal`. |
| `tunekit.wheel` | `WheelHandler`: scrolls a `Flickable` from wheel events (`handle_wheel`) and key presses (`handle_key`, when `key_navigation_enabled` is set). Supports step sizes and page scrolling with modifiers. Positions are clamped to the content and rounded to pixels. |

```python
from tunekit.corner import corner
from tunekit.theme import Theme
from tunekit.wheel import WheelHandler
from tunekit.wheel_event import Flickable

corner([4, 8])          # top corners 4, bottom corners 8

root = Theme()
child = Theme(parent=root)
root.set("elevation", 2)
child.get("elevation")  # 2

view = Flickable(width=400, height=300, content_width=400, content_height=2000)
handler = WheelHandler(target=view)
handler.scroll_flickable((0, 0), (0, -120))  # one wheel notch down: True
view.content_y                               # 60.0
```

## Tests

```
pip install -e ".[test]"
pytest
```