"""Canned coach hints for every exercise and learning event."""
import random
from typing import Dict, List, Optional

from wordquest.models.hint_models import HintTrigger, ModuleType

# Every cell holds at least five Hebrew hints shorter than 100 characters.
# None of them may name an answer, see hint_safety.
LOCAL_HINTS: Dict[ModuleType, Dict[HintTrigger, List[str]]] = {
    ModuleType.MAGIC_E: {
        HintTrigger.START: [
            "בוא נגלה את הקסם של e בסוף המילה! 🪄",
            "זוכר? e בסוף גורמת לאות באמצע להגיד את השם שלה ✨",
            "כל מילה פה מסתתרת עם Magic E. מוכן? 🎩",
            "תקשיב טוב לצליל של האות באמצע 👂",
            "היום אנחנו קוסמים של האות e! 🧙",
        ],
        HintTrigger.WRONG_1: [
            "כמעט! תגיד את המילה בקול ותקשיב לאות באמצע 🔊",
            "לא נורא! תבדוק אם יש e בסוף ✨",
            "נסה שוב, תחשוב מה e בסוף עושה לצליל 🎵",
            "אופס! תסתכל שוב על האימוג'י, הוא רמז 👀",
            "טעות קטנה, אתה בכיוון! 💪",
        ],
        HintTrigger.WRONG_2: [
            "תנסה להגיד את המילה בלי e ואז עם e. שומע הבדל? 👂",
            "הקסם: האות באמצע אומרת את השם שלה כשיש e בסוף 🪄",
            "תפרק את המילה לצלילים, אחד אחד 🧩",
            "תחשוב על התמונה ותגיד אותה באנגלית לאט 🐢",
            "e בסוף שקטה, אבל היא משנה את כל המילה 🤫",
        ],
        HintTrigger.WRONG_3: [
            "זה בסדר לטעות! ננסה צליל אחר יחד 🤗",
            "קח נשימה. תקשיב לאות באמצע ולא לאות האחרונה 🌬️",
            "טריק: תמחק בראש את ה-e ותשווה את שני הצלילים 🔄",
            "תקרא כל אפשרות בקול, לאט לאט 📢",
            "גם קוסמים מתאמנים הרבה. עוד ניסיון אחד! 🧙",
        ],
        HintTrigger.STREAK: [
            "וואו, אתה קוסם אמיתי של e! 🔥",
            "רצף מדהים! הקסם עובד לך ✨",
            "אין עליך! שלוש ברצף 🎉",
            "אתה שומע את הקסם כמו מקצוען 🎧",
            "תמשיך ככה, השרביט בוער! 🪄",
        ],
        HintTrigger.COMPLETE: [
            "סיימת את מעבדת הקסם! כל הכבוד 🏅",
            "איזה יופי! למדת איך e משנה מילים 🌟",
            "השלמת את השלב, אתה קוסם מוסמך 🎓",
            "כל הכבוד! עכשיו תזהה Magic E בכל מקום 🔍",
            "סיום מושלם לשיעור קסם 🎩",
        ],
        HintTrigger.IDLE: [
            "אני פה אם צריך רמז 🙂",
            "תסתכל על האימוג'י ותחשוב על המילה 🤔",
            "רוצה לנסות? אין מה להפסיד ✨",
            "תגיד את המילה בשקט לעצמך 🗣️",
            "הקסם מחכה לך! 🪄",
        ],
    },
    ModuleType.SENTENCE_BUILDER: {
        HintTrigger.START: [
            "נבנה משפט: The + דבר + is + תיאור 📝",
            "כל משפט מתחיל ב-The. מה בא אחריו? 🧩",
            "סדר את הקוביות כמו רכבת, קרון אחרי קרון 🚂",
            "תחשוב על המשפט בעברית ואז תתרגם חלק-חלק 🔄",
            "היום בונים משפטים אמיתיים באנגלית! 🏗️",
        ],
        HintTrigger.WRONG_1: [
            "כמעט! תבדוק שהמשפט מתחיל ב-The 👀",
            "איפה המילה is? היא באה אחרי הדבר 🧩",
            "נסה שוב: קודם הדבר, אחר כך התיאור 🔁",
            "תקרא את המשפט בקול. זה נשמע טוב? 🔊",
            "אופס, חלק אחד לא במקום. תזיז אותו 🤏",
        ],
        HintTrigger.WRONG_2: [
            "סדר: The, אחריו הדבר, אחריו is, ובסוף התיאור 📋",
            "תחשוב בעברית: 'ה... הוא...' ואז תתרגם 🔄",
            "התיאור תמיד בסוף המשפט 🏁",
            "תסתכל על התמונה: מה רואים ואיך הוא נראה? 🖼️",
            "תתחיל מהקובייה הראשונה ותתקדם לאט 🐢",
        ],
        HintTrigger.WRONG_3: [
            "לא נורא! נבנה יחד, קובייה אחרי קובייה 🤗",
            "טריק: תמצא קודם את The ואת is, השאר יסתדר 🧠",
            "קח הפסקה קטנה ונסה שוב בראש צלול 🌈",
            "כל משפט הוא פאזל. תמצא את החלק הראשון 🧩",
            "גם בונים גדולים טועים. עוד ניסיון! 🏗️",
        ],
        HintTrigger.STREAK: [
            "משפט אחרי משפט, אתה בונה מעולה! 🔥",
            "וואו, רצף של משפטים מושלמים 🌟",
            "אתה מדבר אנגלית כמו גדול! 🗣️",
            "הרכבת שלך נוסעת מהר! 🚄",
            "אין עליך, תמשיך ככה 💪",
        ],
        HintTrigger.COMPLETE: [
            "סיימת לבנות את כל המשפטים! 🏆",
            "כל הכבוד! עכשיו אתה יודע לבנות משפט 🎉",
            "איזה בונה משפטים מוכשר! 🏗️",
            "סיום מעולה! The + דבר + is כבר בכיס שלך 👜",
            "השלמת את השלב בהצלחה 🌟",
        ],
        HintTrigger.IDLE: [
            "צריך עזרה? תתחיל מ-The 🙂",
            "איזו קובייה באה ראשונה? 🤔",
            "אני מחכה לראות את המשפט שלך ✨",
            "תסתכל על התמונה ותחשוב מה רואים 👀",
            "גרור קובייה אחת, זה כבר התחלה! 👆",
        ],
    },
    ModuleType.PRICE_TAG: {
        HintTrigger.START: [
            "סדר: The + פריט + is + מספר + dollar 💲",
            "תסתכל על תג המחיר, כמה כתוב שם? 🏷️",
            "היום אנחנו בקניות! בוא נלמד מחירים 🛍️",
            "מספרים עגולים באנגלית נגמרים ב-ty 🔢",
            "כל מחיר מסתיים במילה dollar 💵",
        ],
        HintTrigger.WRONG_1: [
            "כמעט! תספור שוב את העשרות 🔢",
            "תבדוק את תג המחיר עוד פעם 🏷️",
            "נסה שוב, תחשוב כמה שטרות של עשר יש פה 💵",
            "אופס! האם שמת dollar בסוף? 💲",
            "לא נורא, תקרא את המספר בקול 🔊",
        ],
        HintTrigger.WRONG_2: [
            "תספור בעשרות: 10, 20, 30... עד שתגיע למחיר 🔢",
            "ty בסוף אומר 'עשרות'. כמה עשרות יש? 🤔",
            "תסתכל רק על הספרה הראשונה של המחיר 👀",
            "סדר: קודם הפריט, אחר כך is, ואז המחיר 📋",
            "תחשוב על כסף: כמה שטרות צריך לשלם? 💰",
        ],
        HintTrigger.WRONG_3: [
            "זה בסדר! נספור יחד לאט לאט 🤗",
            "טריק: הספרה הראשונה אומרת כמה עשרות יש 🧠",
            "תחשוב על קופה בסופר, סופרים שטר אחרי שטר 🛒",
            "קח נשימה. המחיר כתוב על התג, רק צריך לקרוא 🏷️",
            "עוד ניסיון אחד, אתה כמעט שם! 💪",
        ],
        HintTrigger.STREAK: [
            "אתה מומחה מחירים! 🔥",
            "וואו, אפשר לשלוח אותך לקניות לבד! 🛍️",
            "רצף מושלם של מחירים 💯",
            "הקופאי מתרשם ממך! 🧾",
            "אין עליך, תמשיך לספור ככה 🌟",
        ],
        HintTrigger.COMPLETE: [
            "סיימת את כל תגי המחיר! 🏆",
            "כל הכבוד! עכשיו אתה יודע לקרוא מחירים 💵",
            "קנייה מוצלחת! השלמת את השלב 🛍️",
            "איזה מומחה לכסף! 🎉",
            "סיום מעולה, המספרים שלך 🌟",
        ],
        HintTrigger.IDLE: [
            "תסתכל על תג המחיר 🏷️",
            "כמה עשרות רואים במחיר? 🤔",
            "אני פה אם צריך עזרה בספירה 🙂",
            "זוכר? מספרים עגולים נגמרים ב-ty 🔢",
            "הקופה מחכה, בוא נמשיך 🛒",
        ],
    },
    ModuleType.VOCABULARY: {
        HintTrigger.START: [
            "תסתכל על התמונה ותחשוב איך אומרים את זה באנגלית 🖼️",
            "היום אוספים מילים חדשות לאוצר שלך! 💎",
            "כל מילה שאתה לומד היא כוכב באוסף 🌟",
            "תקשיב טוב ותבחר לאט 👂",
            "מוכן? בוא נלמד מילים! 📚",
        ],
        HintTrigger.WRONG_1: [
            "כמעט! תסתכל שוב על האימוג'י 👀",
            "נסה שוב, תחשוב איפה משתמשים בדבר הזה 🤔",
            "אופס! תגיד את האפשרויות בקול 🔊",
            "לא נורא, כל טעות מלמדת משהו 🌱",
            "תחשוב מה עושים עם הדבר הזה ✋",
        ],
        HintTrigger.WRONG_2: [
            "תדמיין שאתה הולך בבית. איפה תמצא את זה? 🏠",
            "תחשוב על האות הראשונה של המילה 🔤",
            "תפסול קודם את מה שבטוח לא מתאים ❌",
            "תחשוב אם זה חפץ, פעולה או תיאור 🧐",
            "תסתכל על הצבע והצורה בתמונה 🎨",
        ],
        HintTrigger.WRONG_3: [
            "זה בסדר! כל אלוף טעה פעם 🤗",
            "טריק: תפסול אפשרות אחת ותבחר מהשאר 🧠",
            "קח נשימה ותקרא כל אפשרות לאט 🌬️",
            "נסה לזכור איפה ראית את המילה הזאת קודם 💭",
            "עוד ניסיון! אני מאמין בך 💪",
        ],
        HintTrigger.STREAK: [
            "אוצר המילים שלך גדל! 🔥",
            "וואו, אתה מכיר המון מילים! 🌟",
            "רצף מדהים, תמשיך ככה 🚀",
            "אתה מילון מהלך! 📖",
            "אין עליך! 🎉",
        ],
        HintTrigger.COMPLETE: [
            "סיימת את כל המילים! 🏆",
            "כל הכבוד! האוסף שלך מתמלא 💎",
            "איזה שלב! למדת המון 🌟",
            "השלמת את אוצר המילים להיום 📚",
            "סיום מעולה, אתה אלוף מילים 🥇",
        ],
        HintTrigger.IDLE: [
            "האימוג'י הוא רמז! 😊",
            "צריך עזרה? תחשוב על התמונה 🤔",
            "אני פה איתך 🙂",
            "תגיד את המילה בעברית ואז תחפש אותה באנגלית 🔄",
            "בוא נמשיך לאסוף מילים 💎",
        ],
    },
    ModuleType.BOSS: {
        HintTrigger.START: [
            "הבוס מחכה! תראה לו מה למדת 👾",
            "זה הקרב הגדול. אתה מוכן! ⚔️",
            "כל תשובה פוגעת בבוס 💥",
            "תזכור את כל מה שתרגלת, אתה חזק! 💪",
            "נשימה עמוקה, ויוצאים לקרב 🛡️",
        ],
        HintTrigger.WRONG_1: [
            "הבוס התחמק הפעם. נסה שוב! 🛡️",
            "כמעט פגעת! תקרא את השאלה שוב 👀",
            "לא נורא, גם גיבורים מפספסים 🦸",
            "תחשוב על מה שתרגלת בשלבים הקודמים 🧠",
            "אופס! תסתכל על הרמז בתמונה 🖼️",
        ],
        HintTrigger.WRONG_2: [
            "תיזכר באימונים: איך פתרת שאלה כזאת קודם? 💭",
            "תפסול קודם את מה שבטוח לא מתאים ❌",
            "תקרא כל אפשרות בקול לפני שאתה בוחר 🔊",
            "תחשוב לאיזה נושא השאלה שייכת 🗂️",
            "לאט ובטוח מנצחים בוסים 🐢",
        ],
        HintTrigger.WRONG_3: [
            "זה בסדר! הבוס קשה, אבל אתה חזק יותר 💪",
            "קח הפסקה קטנה ותחזור לקרב 🌈",
            "טריק: תחשוב על התמונה ואז על הצליל 🧠",
            "גם גיבורי-על מתאמנים שוב. עוד ניסיון! 🦸",
            "אל תוותר, הבוס כבר מתעייף 😮‍💨",
        ],
        HintTrigger.STREAK: [
            "קומבו על הבוס! 🔥",
            "הבוס נחלש מכל תשובה שלך! 💥",
            "אתה בלתי ניתן לעצירה! 🚀",
            "עוד קצת והבוס מובס! ⚔️",
            "איזה רצף של מכות! 🥊",
        ],
        HintTrigger.COMPLETE: [
            "ניצחת את הבוס! 👑",
            "הבוס הובס! אתה גיבור 🏆",
            "כל הכבוד, הקרב הסתיים בניצחון 🎉",
            "איזה קרב! קיבלת כוכבים 🌟",
            "הבוס מודה שאתה חזק ממנו 👾",
        ],
        HintTrigger.IDLE: [
            "הבוס מחכה לתשובה שלך 👾",
            "אני פה אם צריך רמז 🙂",
            "אל תפחד, אתה מוכן! 🛡️",
            "תסתכל שוב על השאלה 👀",
            "בוא נמשיך בקרב ⚔️",
        ],
    },
    ModuleType.MOCK_TEST: {
        HintTrigger.START: [
            "זה מבחן דמה, בדיוק כמו אמיתי 📝",
            "תקרא כל שאלה עד הסוף לפני שאתה עונה 👀",
            "אין לחץ, זה רק תרגול למבחן 🌈",
            "אתה מוכן! עברת את כל הבוסים 💪",
            "בהצלחה! תזכור את כל מה שלמדת 🍀",
        ],
        HintTrigger.WRONG_1: [
            "לא נורא, ממשיכים לשאלה הבאה בראש שקט 🌱",
            "כמעט! במבחן האמיתי תקרא לאט 👀",
            "טעות אחת לא משנה הרבה, תמשיך 💪",
            "תחשוב על הנושא של השאלה 🗂️",
            "נסה לזכור את הרמזים מהמשחקים 💭",
        ],
        HintTrigger.WRONG_2: [
            "תפסול קודם אפשרויות שבטוח לא מתאימות ❌",
            "תקרא את השאלה שוב, מילה אחרי מילה 🔍",
            "תחשוב על התמונה ועל הצליל יחד 🧠",
            "קח רגע לנשום לפני התשובה הבאה 🌬️",
            "תיזכר איך פתרת שאלות כאלה בשלבים 💭",
        ],
        HintTrigger.WRONG_3: [
            "זה בסדר! מבחן דמה נועד ללמוד ממנו 🤗",
            "טריק: תענה קודם על מה שאתה בטוח בו 🧠",
            "תנשום עמוק, יש עוד הרבה שאלות 🌈",
            "כל טעות פה עוזרת לך במבחן האמיתי 🌱",
            "אל תוותר, אתה מתקדם יפה 💪",
        ],
        HintTrigger.STREAK: [
            "וואו, אתה עונה כמו אלוף! 🔥",
            "רצף מעולה במבחן! 🌟",
            "אתה מוכן למבחן האמיתי! 🚀",
            "תשובה אחרי תשובה, מדהים 🎉",
            "אין עליך! 💯",
        ],
        HintTrigger.COMPLETE: [
            "סיימת את מבחן הדמה! 🎓",
            "כל הכבוד על ההתמדה עד הסוף 🏆",
            "איזה מבחן! אתה מוכן לאמיתי 📝",
            "סיום מעולה, תהיה גאה בעצמך 🌟",
            "השלמת את המבחן בהצלחה 🎉",
        ],
        HintTrigger.IDLE: [
            "קח את הזמן, אין לחץ 🙂",
            "תקרא את השאלה שוב 👀",
            "אני פה לעודד אותך 📣",
            "תחשוב בשקט ותבחר 🤔",
            "בוא נמשיך, אתה מצליח 💪",
        ],
    },
}

STREAK_TRIGGER_LENGTH = 3


def get_all_hints_for_module(module: ModuleType) -> Dict[HintTrigger, List[str]]:
    """Get every canned hint of a module, keyed by trigger."""
    return {trigger: list(hints) for trigger, hints in LOCAL_HINTS[module].items()}


def get_hint(module: ModuleType, trigger: HintTrigger, rng: Optional[random.Random] = None) -> str:
    """Pick one canned hint uniformly at random."""
    if rng is None:
        rng = random.Random()
    return rng.choice(LOCAL_HINTS[module][trigger])


def trigger_for_attempts(attempt_count: int) -> HintTrigger:
    """Map the number of failed attempts on the current item to a trigger."""
    if attempt_count >= 3:
        return HintTrigger.WRONG_3
    if attempt_count == 2:
        return HintTrigger.WRONG_2
    if attempt_count == 1:
        return HintTrigger.WRONG_1
    return HintTrigger.START


def select_trigger(
    is_correct: Optional[bool] = None,
    attempt_count: int = 0,
    streak: int = 0,
    game_complete: bool = False,
) -> Optional[HintTrigger]:
    """Decide which event a game screen should react to, if any.

    A plain correct answer gets no hint; only streaks are celebrated.
    """
    if game_complete:
        return HintTrigger.COMPLETE
    if streak >= STREAK_TRIGGER_LENGTH:
        return HintTrigger.STREAK
    if is_correct is False:
        return trigger_for_attempts(max(attempt_count, 1))
    return None
