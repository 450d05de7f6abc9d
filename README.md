# saturn

A small arcade game built with pygame.

You play a crab at the bottom of a beach. Eight rows of stones slide across
the 240×160 playfield from right to left. When a stone has gone fully off the
left edge, it comes back at the right edge with a new random speed of 1 or 2
pixels per frame. If a stone touches the crab, the crab goes back to where it
started. Walk into the ball to push it down the screen, 5 pixels per frame of
contact. When the ball reaches the bottom, it reappears at the top at a random
column and the scene counts one point.

## Installing

```
pip install .
```

## Playing

```
saturn
```

Move the crab with the arrow keys or with W, A, S and D. Close the window to
quit.

Options:

- `--scale N` draws the playfield N times larger in the window (default 3,
  at least 1).
- `--frames N` stops after N frames instead of running until the window is
  closed.

## What the game does not do

There is no sound, and the score is not shown on screen. Each point adds one
to `Scene.score` and writes the message `score` at INFO level to the
`saturn.scene` logger, which the `saturn` command does not configure. The
images are simple shapes drawn at start-up; no image files are loaded.

## Using the pieces

Every object in the game has `behave()`, which advances it by one frame, and
`render(frame)`, which draws it onto anything with a pygame-style
`blit(image, (x, y))` method. The objects exchange events through a simple
publish/subscribe scheme in `saturn.observer`:

```python
from saturn.observer import Event, EventKind, Listener, Observable, Rect

listener = Listener()
source = Observable("stone")
source.register_subscription(listener, Event(EventKind.RESET))

source.notify(Event(EventKind.RESET))
print(listener.poll_events())   # [the RESET event]; the ledger is now empty
```

A subscription is keyed by the kind of event, not by what the event carries.
So a listener subscribed with any `POSITION` event receives every position
that is published. A `POSITION` event must carry a `Rect`; a `RESET` event
must not. `Rect.touches` tells whether two rectangles overlap.

`saturn.scene.Scene` builds the player, the eight moving stones, the ball
(`RunningStone`) and the `Background`, and connects them. It takes a
controller and five images as keyword arguments:

```python
from saturn.scene import Scene

scene = Scene(controller, ball=..., paddle_mid=..., paddle_end=...,
              crab=..., background=...)
scene.behave()
scene.render(frame)
```

A controller is anything with `update()` and `is_pressed(button)`, where
`button` is a `saturn.player.Button`. `saturn.app.KeyboardInput` is the
keyboard controller the game uses; it reads `pygame.key.get_pressed` unless
given another function that returns key states. `saturn.app.main` opens the
window and runs the game loop at 60 frames per second.

## Running the tests

```
pip install .[test]
pytest
```