"""
Static language categories.

The landing page shows a fixed list of languages with the number of
teachers advertised for each.  The list is plain data and does not
touch the database.
"""

from typing import List

from ..schemas.category import LanguageCategory


LANGUAGE_CATEGORIES: List[LanguageCategory] = [
    LanguageCategory(id=1, language="english", title="English tutors", teachers="20,583 teachers", icon="\U0001F4D8"),
    LanguageCategory(id=2, language="spanish", title="Spanish tutors", teachers="8,538 teachers", icon="\U0001F4D7"),
    LanguageCategory(id=3, language="french", title="French tutors", teachers="6,282 teachers", icon="\U0001F4D9"),
    LanguageCategory(id=4, language="german", title="German tutors", teachers="5,112 teachers", icon="\U0001F4D5"),
    LanguageCategory(id=5, language="italian", title="Italian tutors", teachers="3,478 teachers", icon="\U0001F4D2"),
    LanguageCategory(id=6, language="chinese", title="Chinese tutors", teachers="7,029 teachers", icon="\U0001F4D3"),
    LanguageCategory(id=7, language="arabic", title="Arabic tutors", teachers="2,284 teachers", icon="\U0001F4D4"),
    LanguageCategory(id=8, language="japanese", title="Japanese tutors", teachers="1,524 teachers", icon="\U0001F4DA"),
    LanguageCategory(id=9, language="portuguese", title="Portuguese tutors", teachers="3,311 teachers", icon="\U0001F4D6"),
]


class CategoryService:
    @classmethod
    def list_categories(cls) -> List[LanguageCategory]:
        return list(LANGUAGE_CATEGORIES)
