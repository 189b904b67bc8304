"""Static knowledge base of the studio site."""

from ..models import KnowledgeEntry

SITE_CONTEXT = (
    "ARCHITECT — студия архитектуры и дизайна. Специализируемся на современной "
    "архитектуре, минимализме и функциональном дизайне. Портфолио включает жилые "
    "дома, общественные здания и интерьеры премиум-класса."
)

# Order matters: the first matching entry wins.
FAQ_ENTRIES: tuple[KnowledgeEntry, ...] = (
    KnowledgeEntry(
        question="Какие услуги вы предлагаете?",
        answer=(
            "Мы предлагаем полный спектр архитектурных услуг: проектирование жилых "
            "и коммерческих зданий, дизайн интерьеров, ландшафтный дизайн, авторский "
            "надзор и реконструкция."
        ),
        keywords=frozenset({"услуги", "предлагаете", "чем занимаетесь", "услуга"}),
    ),
    KnowledgeEntry(
        question="Сколько стоит проект?",
        answer=(
            "Стоимость проекта рассчитывается индивидуально в зависимости от площади, "
            "сложности и сроков. Базовый проект дома начинается от 1500 руб/м². "
            "Оставьте заявку для точного расчета."
        ),
        # "ценa" ends with a Latin "a" on the live site; kept so typed variants still match
        keywords=frozenset({"цена", "стоит", "стоимость", "сколько", "ценa"}),
    ),
    KnowledgeEntry(
        question="Как долго длится проектирование?",
        answer=(
            "Средний срок разработки архитектурного проекта — от 2 до 6 месяцев "
            "в зависимости от сложности объекта. Эскизный проект готовится за 2-3 недели."
        ),
        keywords=frozenset({"срок", "долго", "время", "когда", "сроки"}),
    ),
    KnowledgeEntry(
        question="Работаете ли вы по всей России?",
        answer=(
            "Да, мы работаем по всей территории России и СНГ. Для удаленных проектов "
            "используем видеоконференции и выезд на объект при необходимости."
        ),
        keywords=frozenset({"регион", "город", "россия", "где", "место"}),
    ),
)
