# netlab

A handful of small networking programs for seeing how sockets and traffic
shaping behave. Each runs from the command line. The servers listen on all
interfaces by default, and the clients talk to `127.0.0.1`. Every network
command takes `--host` and `--port`.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## Leaky bucket simulator

```
netlab-leaky
```

The command asks for the bucket size, the outgoing rate, the number of
inputs and then each incoming packet size. For each packet it prints the
incoming size. If the bucket overflows, it prints how many packets were
dropped. It then prints the buffer level and the level left after the bucket
drains by the outgoing rate. Input that is not a number ends the run with
exit status 1.

From Python, use `netlab.leaky`:

- `LeakyBucket(size, outgoing_rate).offer(incoming)` handles one burst and
  returns a `BucketStep` with `incoming`, `dropped`, `buffered` and
  `remaining`. On an overflow, `buffered` is the level before the burst, and
  the bucket is then filled to its size.
- `simulate(size, outgoing_rate, packets)` runs a fresh bucket over a
  sequence of bursts and returns the list of steps.

## String reversal over TCP

```
netlab-reverse-server
netlab-reverse-client
```

The server uses port 8090 by default. It accepts a single connection, prints
the string it receives, sends it back reversed byte by byte and exits.

The client reads one line, drops leading whitespace and keeps at most 99
characters. It sends the line and prints the reversed reply.

From code, use these:

- `netlab.tcp_reverse.reverse_text(data)` reverses bytes.
- `request_reverse(text, host, port)` asks a server to reverse `text`.
- `serve_once(sock, out)` serves one client on a listening socket.

## UDP acknowledgement server

```
netlab-udp-server
netlab-udp-client
```

The server uses port 12345 by default. It prints each datagram and answers
`Message received`. The message `exit` shuts it down without a reply.

The client sends the first line you type and prints the server's answer. It
also accepts `--timeout` in seconds. An empty line is not sent: the client
prints `No message entered. Exiting.` and exits with status 1.

From code, use these:

- `netlab.udp_echo.send_message(message, host, port, timeout)` sends a
  message. It raises `EmptyMessageError` when there is nothing to send.
- `serve(sock, out)` runs the server loop on a bound socket and returns
  every message received.

## UDP time server

```
netlab-time-server
netlab-time-client
```

The server uses port 5000 by default. It answers every datagram with the
current local time in the form `Time is HH:MM:SS`. Each reply is sent from
its own thread, so several clients may use the server at once. When a
datagram reading `stop` arrives, the server answers it and then shuts down.

The client reads whitespace-separated words and sends each one. It prints
each reply, and stops when you type `stop` or input ends.

`time_message(moment)`, `serve(sock, out, clock)` and
`client_session(sock, messages, address, out)` in `netlab.udp_time` do the
same from code. The `clock` parameter lets you supply the time source.

## TCP chat

```
netlab-chat-server
netlab-chat-client
```

This is a two-way conversation over one TCP connection, on port 5000 by
default. The client speaks first, and then the two sides take turns, one line
each. Either side ends the conversation by sending `stop`. It also ends when
the other side disconnects or when input on stdin ends. Lines longer than
1023 characters are cut short.

`server_session(conn, replies, out)` and `client_session(sock, messages, out)`
in `netlab.tcp_chat` run the same exchange over sockets you provide.

## What it does not do

- The reversal and chat servers serve a single client and then exit.
- `netlab-time-client` never sends `stop` itself. To shut the time server
  down, send it a `stop` datagram some other way, for example with
  `netlab.udp_time.serve` peers of your own or any UDP tool.
- Nothing is encrypted or authenticated.
- Messages are not framed. Each receive takes at most one buffer's worth:
  1023 bytes for TCP and the acknowledgement server, 49 bytes for the time
  server.