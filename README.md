# restotrees

Keep a restaurant chain's records in balanced (AVL) search trees and answer
the monthly questions a chain manager asks: how much did a restaurant sell,
how was a cuisine rated, how much went on publicity, and which restaurant
won each cuisine this month.

The package has no dependencies beyond the standard library.

## What is inside

- `restotrees.avl.AVLTree` – a general self-balancing ordered map. Keys are
  kept sorted; `insert(key, value)` returns `False` and leaves the tree
  unchanged when the key is already present. It also offers
  `find(key, default)`, `clear()`, `keys()`, `items()`, `in`, `len()`,
  iteration in key order and `height()` (`-1` when empty).
- `restotrees.models` – the records: `Place`, `Rating`, `Sales`, `Cost`,
  `Cuisine` and `Restaurant`, all dataclasses.
  - `str(place)` gives `city wilaya country district`, and `Place.parse`
    reads that same form back (it raises `ValueError` on fewer than four
    words).
  - Every `Restaurant` starts with the five cuisines Algerian, Syrian,
    European, Indian and Chinese. `find_cuisine(name)` looks one up by exact
    name and returns `None` when absent.
  - `to_csv_row()` gives `id,name,employee_number,type,country,wilaya,city,district`,
    and `append_to_csv(path)` appends that row plus a newline to a file.
- `restotrees.ratings.RatingTree` – cuisine ratings per restaurant, keyed by
  date. `cuisine_rating(month, restaurant_id, cuisine)` and a one-line
  `describe_cuisine_rating(restaurant_id, month, cuisine)`.
- `restotrees.sales.SalesTree` – cuisine sales per restaurant, keyed by date.
  `total_sales`, `cuisine_sales`, the one-line `describe_total_sales` and
  `describe_cuisine_sales`, and `monthly_report`, which returns the report
  as text.
- `restotrees.costs.CostTree` – total cost and publicity spending per
  restaurant, keyed by date; `publicity_spending(month, restaurant_id)`.
- `restotrees.restaurants.RestaurantTree` – restaurants keyed by id:
  `insert`, `in`, `clear`, `find_by_id` (or `None`), `format_ids` (the ids in
  ascending order, each followed by a space), iteration in id order and
  `len()`.
- `restotrees.cuisine` – ratings read from a comma-separated ratings file,
  scores and monthly winners.

Lookups in `RatingTree`, `SalesTree` and `CostTree` match the stored date
exactly and give `0.0` when the date, restaurant or cuisine is not recorded.

Each date in these trees holds one entry: inserting a date that is already
present leaves the tree unchanged (`insert` returns `False`), so when a file
has several rows for the same date only the first one is kept.

## Input files

`RatingTree`, `SalesTree`, `CostTree` and `RestaurantTree` load themselves
from a text file with `read_file(path)`. The first line is a header and is
skipped; every other line holds whitespace-separated fields. Lines with too
few fields are logged and skipped.

| Tree             | Columns                                                    |
|------------------|------------------------------------------------------------|
| `RatingTree`     | date, id, Algerian, Syrian, Indian, Chinese, European      |
| `SalesTree`      | date, id, Algerian, Syrian, Indian, Chinese, European      |
| `CostTree`       | date, id, total cost, publicity spending                   |
| `RestaurantTree` | id, name, employees, type, country, wilaya, city, district |

Numbers are read from the start of each field. In `RatingTree` and
`SalesTree` a field that does not start with a number raises `ValueError`;
`CostTree` and `RestaurantTree` log such lines and skip them. When
`RestaurantTree` builds a restaurant's `Place`, the wilaya column becomes the
place's `district` and the district column its `wilaya`.

## Scores and monthly winners

`restotrees.cuisine.cuisine_rating(path, restaurant_id, month, cuisine)`
reads a comma-separated ratings file after its header line. The first row
whose date starts with `month` (`YYYY-MM`) and whose id matches gives the
rating; the cuisine ratings are taken from columns 3 to 7 (zero-based) for
Algerian, Syrian, Indian, Chinese and European. It returns `None` when no
row matches. Cuisine names are matched without regard to case; an unknown
name raises `ValueError`.

- `calculate_score(restaurant, month, cuisine, ratings_path, sales)` is the
  restaurant's total sales for the month (from a `SalesTree`) plus its
  rating for the cuisine divided by 100; a missing rating counts as
  `MISSING_RATING` (`-1.0`).
- `cuisine_scores(...)` gives `(restaurant id, score)` for every restaurant
  that serves the cuisine.
- `highest_score_restaurant_id(scores)` picks the id with the highest score
  (the first one on a tie), or `None` when there are no scores.
- `monthly_winners(restaurants, month, ratings_path, sales)` returns a dict
  from cuisine name to winning id for Chinese, Algerian, Syrian, European and
  Indian.
- `format_winners(month, winners)` turns that dict into the announcement
  text, showing `NO_WINNER` (`-1`) for a cuisine without a winner.

## Example

```python
from restotrees.sales import SalesTree
from restotrees.costs import CostTree

sales = SalesTree()
sales.insert("2023-05", 7, {"Algerian": 120.0, "Chinese": 80.0})
print(sales.total_sales("2023-05", 7))               # 200.0
print(sales.cuisine_sales("2023-05", 7, "Chinese"))  # 80.0
print(sales.monthly_report(7, "2023-05", "Chinese"))

costs = CostTree()
costs.insert("2023-05", 7, 900.0, 150.0)
print(costs.publicity_spending("2023-05", 7))        # 150.0
```

## What it does not do

This is a library only. There is no command-line program and no interactive
prompt for entering new restaurants; `Restaurant.append_to_csv` writes out a
restaurant you have already built. Records live in memory and are not saved
anywhere except by that method. Trees cannot remove single entries, only
`clear` them all.