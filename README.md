# katabox

A set of small coding katas. Each one is a plain Python module that you
import and call. The package has no dependencies outside the standard
library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

### Tennis scoring: `katabox.tennis`

`tennis_score(player1, player2)` takes the number of points each player has
won and returns the score as text.

```python
from katabox.tennis import tennis_score

tennis_score(0, 0)   # "Love-All"
tennis_score(3, 3)   # "Deuce"
tennis_score(3, 1)   # "Forty-Fifteen"
tennis_score(5, 4)   # "Advantage player1"
tennis_score(4, 6)   # "Win for player2"
```

### A tiny ALU: `katabox.alu`

`ALU` is a dataclass with `operand1`, `operand2` (both `-1` when unset) and
`opcode` (`"ADD"`, `"MUL"` or `"SUB"`). `enable_signal()` returns a frozen
`Result` that holds a `status` and a `value`:

- `Status.OK` and the computed value when everything is valid;
- `Status.BAD_OPCODE` when the opcode is unknown;
- `Status.BAD_OPERAND1` or `Status.BAD_OPERAND2` when that operand is unset.

When the operation fails, `value` is `65535`.

```python
from katabox.alu import ALU, Status

result = ALU(operand1=10, operand2=20, opcode="SUB").enable_signal()
result.value   # -10
result.status  # Status.OK
```

### Wheel of Fortune prize: `katabox.wheel`

`get_price(answers, guesses)` plays the first 26 letters of `guesses`, one
per turn, against the answer words and returns the total prize money.
Letters that are found score 100 times the current streak for each letter
revealed. Finding an answer's first letter first earns a 1000 bonus and a
2000 chance on the next turn. `remaining_letters(answers, guesses)` lists
the letters of each answer that none of those guesses matched.

```python
from katabox.wheel import get_price

get_price(["BUILDLEV", "EATREALROBOT"], "ERABCDFGHIJKLMNOPQSTUVWXYZ")  # 6500
```

### String sums: `katabox.string_sum`

`split_and_sum` adds up dash-separated integers. An empty string gives 0,
and a piece that is not an integer raises `ValueError`. `check_equation`
checks a text of the form `a+b=c` and returns a `Verdict`.

```python
from katabox.string_sum import split_and_sum, check_equation

split_and_sum("100-10-20")       # 130
check_equation("25+61=86")       # Verdict.PASS
check_equation("5++5=10")        # Verdict.ERROR
check_equation("10000+1=10002")  # Verdict.FAIL
```

### Video rental statement: `katabox.video_rental`

A `Movie` has a title and a `PriceCode` (`REGULAR`, `NEW_RELEASE` or
`CHILDREN`). A `Rental` pairs a movie with a number of days, and its
`charge()` and `points()` methods give what it costs and how many frequent
renter points it earns. `total_amount` and `frequent_renter_points` add
these up over a list of rentals. `StatementFormatter` renders the text, and
`Customer.statement()` uses it for that customer's rentals.

```python
from katabox.video_rental import Customer, Movie, PriceCode, Rental

customer = Customer("Alice")
customer.add_rental(Rental(Movie("Some Film", PriceCode.NEW_RELEASE), 2))
print(customer.statement())
```

The statement has a "Rental Record for Alice" header, then one line per
rental with a tab before the title and another before the charge, then
"Amount owed is 6.0" and "You earned 2 frequent renter points".

### Warm-up exercises: `katabox.exercises`

- `decrement_rooms(rooms)`: a new list with every non-zero count lowered by one.
- `PointRecorder`: collects `Point`s, and `button_lines()` yields `"x y"` lines in the order they were added.
- `make_sign(signatures)`: sorts `Signature`s by date code and returns `"code : name"` lines. It raises `InvalidDateCodeError` if a date code is outside 1 to 9.
- `circle_action(is_draw, is_outline, x, y)`: returns the `CircleAction` to take. At the origin the answer is always `NOTHING`.
- `bubble_sort(values)` and `selection_sort(values)`: return a new ascending list.
- `Vehicle`: starts with a full tank, and `accelerate()` burns one unit. `GasStation(vehicle).refuel()` fills the tank again.

## What it does not do

There is no command-line program. Every kata is called from Python code.
Nothing is drawn on screen: `circle_action` only reports which action to
take, and `button_lines` and `make_sign` return text rather than print it.