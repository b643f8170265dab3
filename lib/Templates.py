"""
lib/Templates.py

Purpose:
The text every file renders. Pure presentation data plus the functions that fill it in.

Place in Architecture:
Called by the StateEngine, which decides which variant applies. Nothing here looks at engine state directly.

Interface:

	NeedsPets(name, remaining, greeting): "needs attention" variant.
	AtPeace(name, greeting): "satisfied" variant.
	Mad(name, greeting): "overdone" variant.
	JournalReport(census): report over the other files' states.

TODOs/FIXMEs:
None.
"""

DEFAULT_GREETING = "Hello StarCon!"

KITTY = r"""
                           __ _..._ _
                           \ `)    `(/
                           /`       \
                           |   d  b  |
             .-"````"=-..--\=    Y  /=
           /`               `-.__=.'
    _     / /\                 /o
   ( \   / / |                 |
    \ '-' /   >    /`""--.    /
     '---'   /    ||      |   \\
             \___,,))      \_,,))
"""

HAPPY_KITTY = r"""
     _ _..._ __
    \)`    (` /
     /      `\
    |  d  b   |
    =\  Y    =/--..-="````"-.
      '.=__.-'               `\
         o/                 /\ \
          |                 | \ \   / )
           \    .--""`\    <   \ '-' /
          //   |      ||    \   '---'
         ((,,_/      ((,,___/
"""

MAD_KITTY = r"""
      ,-~-,       ,-~~~~-,    /\  /\
(\   / ,-, \    ,'        ', /  ~~  \
 \'-' /   \ \  /     _      #  <0 0> \
  '--'     \ \/    .' '.    # =  Y  =/
            \     / \   \   `#-..!.-'
             \   \   \   `\ \\
              )  />  /     \ \\
             / /`/ /`__     \ \\__
            (____)))_)))     \__)))
"""

NEEDS_PETS = """{greeting}
My name is: {name}

I NEED TO BE PETTED

Please send me {remaining} pets
"""

AT_PEACE = """{greeting}
My name is: {name}

WOW! YOU GAVE ME ENOUGH PETS!! ❤❤❤❤❤❤❤
"""

MAD = """{greeting}
My name is: {name}

MY HEART IS FICKLE! NO MORE PETS!!!!
"""

ALL_AT_PEACE_REPORT = r"""GAME OVER!!

All the kitties are at peace!!!

             *     ,MMM8&&&.            *
                  MMMM88&&&&&    .
                 MMMM88&&&&&&&
     *           MMM88&&&&&&&&
                 MMM88&&&&&&&&
                 'MMM88&&&&&&'
                   'MMM8&&&'      *
          |\___/|
          )     (             .              '
         =\     /=
           )===(       *
          /     \
          |     |
         /       \
         \       /
  _/\_/\_/\__  _/_/\_/\_/\_/\_/\_/\_/\_/\_/\_
  |  |  |  |( (  |  |  |  |  |  |  |  |  |  |
  |  |  |  | ) ) |  |  |  |  |  |  |  |  |  |
  |  |  |  |(_(  |  |  |  |  |  |  |  |  |  |
  |  |  |  |  |  |  |  |  |  |  |  |  |  |  |
"""

MAD_REPORT = r"""GAME OVER!!!

SO MANY KITIES ARE MAD AT U!!!!!!!!!!!! :-(
       ___
   _.-|   |          |\__/,|   (`\
  (   | {mad} |          |o o  |__ _) )
   "-.|___|        _.( T   )  `  /
    .--'-`-.     _((_ `^--' /_<  \
  .+|______|__.-||__)`-'(((/  (((/
"""

DIARY_REPORT = """Dear Diary,

All my friends are at StarCon! :(

I have to stay at home and pet these kitties :~(

Here's what I've done so far:

* {needing} kitties still need pets
* {at_peace} kitties are at peace with the world
* {mad} kitties are mad because I petted them too much!
"""


def NeedsPets(name, remaining, greeting=DEFAULT_GREETING):
	return NEEDS_PETS.format(greeting=greeting, name=name, remaining=remaining) + KITTY


def AtPeace(name, greeting=DEFAULT_GREETING):
	return AT_PEACE.format(greeting=greeting, name=name) + HAPPY_KITTY


def Mad(name, greeting=DEFAULT_GREETING):
	return MAD.format(greeting=greeting, name=name) + MAD_KITTY


# census maps each Vitality name ('needing', 'at_peace', 'mad') to a count.
def JournalReport(census):
	if (census['needing'] == 0 and census['mad'] == 0):
		return ALL_AT_PEACE_REPORT
	if (census['needing'] == 0):
		return MAD_REPORT.format(mad=census['mad'])
	return DIARY_REPORT.format(**census)
